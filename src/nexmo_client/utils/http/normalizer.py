"""Response normalization and exactly-once dispatch.

A :class:`ResponseNormalizer` owns one request lifecycle. It sends the
request, accumulates the streamed body, decodes it as JSON, classifies the
result into an :class:`~nexmo_client.models.Outcome`, and hands that outcome
to the caller's continuation exactly once.

State machine::

    SENT -> STREAMING -> DECODED | DECODE_FAILED -> DISPATCHED
    SENT | STREAMING -> TRANSPORT_FAILED

No retries, no timeout and no connection reuse: every normalizer opens its
own ``httpx.AsyncClient`` and closes it when the exchange ends.
"""

import inspect
import json
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

import httpx

from ...exceptions import DecodeError, TransportError
from ...models.outcome import Outcome
from ..security import safe_log_dict, sanitize_headers, sanitize_url
from .request import RequestDescription

logger = logging.getLogger(__name__)

Continuation = Callable[[Optional[Exception], Any], Union[None, Awaitable[None]]]
Classifier = Callable[[Outcome], Outcome]


class ResponseState(str, Enum):
    """Lifecycle states of a single request."""

    PENDING = "pending"
    SENT = "sent"
    STREAMING = "streaming"
    DECODED = "decoded"
    DECODE_FAILED = "decode_failed"
    TRANSPORT_FAILED = "transport_failed"
    DISPATCHED = "dispatched"


async def invoke_continuation(
    continuation: Optional[Continuation], outcome: Outcome
) -> None:
    """Call a continuation with the ``(error, result)`` pair of an outcome.

    Coroutine continuations are awaited. Exceptions raised by the
    continuation propagate to the caller.

    :param continuation: Caller-supplied callback, or ``None``
    :type continuation: Optional[Continuation]
    :param outcome: Outcome to deliver
    :type outcome: Outcome
    """
    if continuation is None:
        return
    error, result = outcome.callback_args()
    returned = continuation(error, result)
    if inspect.isawaitable(returned):
        await returned


class ResponseNormalizer:
    """Drive one request through the response state machine.

    :param request: The request to send
    :type request: RequestDescription
    :param transport: Optional httpx transport (tests use ``httpx.MockTransport``)
    :type transport: Optional[httpx.AsyncBaseTransport]
    :param classifier: Optional hook that may re-classify the normalized
        outcome before dispatch
    :type classifier: Optional[Classifier]
    :param debug: Emit request/response tracing at DEBUG level
    :type debug: bool
    """

    def __init__(
        self,
        request: RequestDescription,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        classifier: Optional[Classifier] = None,
        debug: bool = False,
    ):
        self.request = request
        self.state = ResponseState.PENDING
        self.status_code: Optional[int] = None
        self._transport = transport
        self._classifier = classifier
        self._debug = debug
        self._dispatched = False

    @property
    def dispatched(self) -> bool:
        return self._dispatched

    def _trace(self, msg: str, *args: Any) -> None:
        if self._debug:
            logger.debug(msg, *args)

    async def run(self, continuation: Optional[Continuation] = None) -> Outcome:
        """Send the request and deliver its outcome.

        :param continuation: Optional ``(error, result)`` callback
        :type continuation: Optional[Continuation]
        :return: The normalized outcome
        :rtype: Outcome
        :raises RuntimeError: If this normalizer has already run
        """
        if self.state is not ResponseState.PENDING:
            raise RuntimeError("ResponseNormalizer instances are single-use")

        outcome = await self._exchange()
        if self._classifier is not None:
            outcome = self._classifier(outcome)
        await self.dispatch(outcome, continuation)
        return outcome

    async def dispatch(
        self, outcome: Outcome, continuation: Optional[Continuation]
    ) -> None:
        """Deliver an outcome unless one was already delivered.

        :param outcome: Outcome to deliver
        :type outcome: Outcome
        :param continuation: Optional ``(error, result)`` callback
        :type continuation: Optional[Continuation]
        """
        if self._dispatched:
            logger.debug(
                "Suppressing duplicate dispatch for %s %s",
                self.request.method,
                sanitize_url(self.request.path),
            )
            return
        self._dispatched = True
        if self.state is not ResponseState.TRANSPORT_FAILED:
            self.state = ResponseState.DISPATCHED
        await invoke_continuation(continuation, outcome)

    async def _exchange(self) -> Outcome:
        request = self.request.to_httpx()
        self._trace(
            "=== SEND: %s %s", self.request.method, sanitize_url(self.request.url)
        )
        self._trace("Request headers: %s", sanitize_headers(self.request.headers))
        self._trace("Request fields: %s", safe_log_dict(self.request.fields()))

        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            self.state = ResponseState.SENT
            try:
                response = await client.send(request, stream=True)
            except (httpx.RequestError, httpx.StreamError) as e:
                return self._transport_failed(e)

            try:
                self.state = ResponseState.STREAMING
                self.status_code = response.status_code
                self._trace("Response status %s", response.status_code)
                buffer = bytearray()
                async for chunk in response.aiter_bytes():
                    buffer.extend(chunk)
            except (httpx.RequestError, httpx.StreamError) as e:
                return self._transport_failed(e)
            finally:
                await response.aclose()

        self._trace("response ended")
        return self._decode(bytes(buffer))

    def _transport_failed(self, error: Exception) -> Outcome:
        self.state = ResponseState.TRANSPORT_FAILED
        logger.warning(
            "Problem with API request %s %s: %s",
            self.request.method,
            sanitize_url(self.request.path),
            error,
        )
        return Outcome.transport_failure(
            TransportError(f"Request to Nexmo failed: {error}", original_error=error)
        )

    def _decode(self, body: bytes) -> Outcome:
        text = body.decode("utf-8", errors="replace")
        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as e:
            self.state = ResponseState.DECODE_FAILED
            logger.warning(
                "Could not convert API response to JSON, returning raw body: %s", e
            )
            return Outcome.decode_failure(DecodeError(text, original_error=e), text)

        self.state = ResponseState.DECODED
        return Outcome.success(payload)
