"""SMS and voice send operations.

Send operations share a guard: sender and recipient are checked before any
request is built, and a decoded response is inspected for failures the
upstream service reports inside an HTTP 200 body (invalid sender,
throttling ...).
"""

import logging
from typing import Any, Dict, Optional

from ..core import BaseClient
from ..endpoints import Endpoint
from ..exceptions import ApplicationError, ValidationError
from ..models.options import WapPushOptions
from ..models.outcome import Outcome, OutcomeKind
from ..utils.http import Continuation
from ..utils.validation import require

logger = logging.getLogger(__name__)


def _status_code(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def classify_send_response(outcome: Outcome) -> Outcome:
    """Re-classify a successful send response that reports a failure.

    Two shapes are recognized:

    - a top-level ``status`` with a non-empty ``error-text``
    - a ``messages`` list whose first entry has a non-zero ``status``

    Only the first entry of ``messages`` is inspected. Non-success outcomes
    and payloads without either shape pass through unchanged.

    :param outcome: Normalized outcome of a send request
    :type outcome: Outcome
    :return: The same outcome, or an application error outcome
    :rtype: Outcome
    """
    if outcome.kind is not OutcomeKind.SUCCESS or not isinstance(outcome.payload, dict):
        return outcome

    payload = outcome.payload
    if "status" in payload and payload.get("error-text"):
        return Outcome.application_error(
            ApplicationError(
                payload["error-text"],
                payload=payload,
                status=_status_code(payload["status"]),
            ),
            payload,
        )

    messages = payload.get("messages")
    if isinstance(messages, list) and messages and isinstance(messages[0], dict):
        first = messages[0]
        status = _status_code(first.get("status"))
        if status:
            text = first.get("error-text") or f"Message rejected with status {status}"
            return Outcome.application_error(
                ApplicationError(text, payload=payload, status=status), payload
            )

    return outcome


class MessagingOperations(BaseClient):
    """Text, binary, WAP push and text-to-speech sends."""

    async def send_text_message(
        self,
        sender: str,
        recipient: str,
        message: str,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Send a plain text (unicode) SMS.

        :param sender: Sender address, may be alphanumeric
        :param recipient: Mobile number in international format
        :param message: Body of the text message
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            require(message, "invalidTextMessage", "message")
        except ValidationError as e:
            return await self._reject(e, callback)

        data = {"from": sender, "to": recipient, "type": "unicode", "text": message}
        return await self._send_message(Endpoint.SMS, data, callback)

    async def send_binary_message(
        self,
        sender: str,
        recipient: str,
        body: str,
        udh: str,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Send a binary data SMS.

        :param sender: Sender address, may be alphanumeric
        :param recipient: Mobile number in international format
        :param body: Hex encoded binary data
        :param udh: Hex encoded user data header
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            require(body, "invalidBody", "body")
            require(udh, "invalidUdh", "udh")
        except ValidationError as e:
            return await self._reject(e, callback)

        data = {
            "from": sender,
            "to": recipient,
            "type": "binary",
            "body": body,
            "udh": udh,
        }
        return await self._send_message(Endpoint.SMS, data, callback)

    async def send_wap_push_message(
        self,
        sender: str,
        recipient: str,
        title: str,
        url: str,
        options: Optional[WapPushOptions] = None,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Send a WAP push message.

        :param sender: Sender address, may be alphanumeric
        :param recipient: Mobile number in international format
        :param title: Title of the WAP push
        :param url: WAP push URL
        :param options: Optional validity (defaults to two days)
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            require(title, "invalidTitle", "title")
            require(url, "invalidUrl", "url")
        except ValidationError as e:
            return await self._reject(e, callback)

        options = options or WapPushOptions()
        data = {
            "from": sender,
            "to": recipient,
            "type": "wappush",
            "title": title,
            "url": url,
            "validity": options.validity,
        }
        return await self._send_message(Endpoint.SMS, data, callback)

    async def send_tts_message(
        self,
        sender: str,
        recipient: str,
        message: str,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Send a text-to-speech voice message.

        :param sender: Caller id
        :param recipient: Number to call, in international format
        :param message: Text to be spoken
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            require(message, "invalidTextMessage", "message")
        except ValidationError as e:
            return await self._reject(e, callback)

        data = {"from": sender, "to": recipient, "text": message}
        return await self._send_message(Endpoint.TTS, data, callback)

    async def _send_message(
        self,
        endpoint: Endpoint,
        data: Dict[str, Any],
        callback: Optional[Continuation],
    ) -> Outcome:
        try:
            require(data.get("from"), "invalidSender", "sender")
            require(data.get("to"), "invalidRecipient", "recipient")
        except ValidationError as e:
            return await self._reject(e, callback)

        if self.config.debug:
            kind = "voice" if endpoint is Endpoint.TTS else data.get("type", "sms")
            logger.debug(
                "Sending %s message from %s to %s", kind, data["from"], data["to"]
            )

        return await self._request(
            endpoint,
            data,
            "POST",
            callback=callback,
            classifier=classify_send_response,
        )
