"""Message search operations."""

from typing import Any, Dict, Optional, Sequence

from ..core import BaseClient
from ..endpoints import Endpoint
from ..exceptions import ValidationError
from ..models.outcome import Outcome
from ..utils.http import Continuation
from ..utils.validation import require, validate_message_ids


class SearchOperations(BaseClient):
    """Look up sent and rejected messages."""

    async def search_message(
        self, message_id: str, *, callback: Optional[Continuation] = None
    ) -> Outcome:
        """Look up one sent message by the id returned at submission."""
        self._ensure_initialized()
        try:
            require(message_id, "invalidMessageId", "message_id")
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.SEARCH_MESSAGE, {"id": message_id}, callback=callback
        )

    async def search_messages_by_ids(
        self,
        message_ids: Sequence[str],
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Look up up to ten sent messages by id.

        :param message_ids: Between one and ten message ids
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            validate_message_ids(message_ids)
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.SEARCH_MESSAGES, {"ids": list(message_ids)}, callback=callback
        )

    async def search_messages_by_recipient(
        self,
        date: str,
        to: str,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Look up messages sent to a recipient on a date (``YYYY-MM-DD``)."""
        self._ensure_initialized()
        try:
            require(date, "invalidDate", "date")
            require(to, "invalidRecipient", "to")
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.SEARCH_MESSAGES, {"date": date, "to": to}, callback=callback
        )

    async def search_rejections(
        self,
        date: str,
        to: Optional[str] = None,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Look up rejected messages on a date, optionally for one recipient."""
        self._ensure_initialized()
        try:
            require(date, "invalidDate", "date")
        except ValidationError as e:
            return await self._reject(e, callback)

        data: Dict[str, Any] = {"date": date}
        if to:
            data["to"] = to
        return await self._request(Endpoint.SEARCH_REJECTIONS, data, callback=callback)
