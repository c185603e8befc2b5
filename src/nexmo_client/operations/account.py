"""Account operations: balance, pricing, settings and top-up."""

from typing import Optional

from ..core import BaseClient
from ..endpoints import Endpoint
from ..exceptions import ValidationError
from ..models.outcome import Outcome
from ..utils.http import Continuation
from ..utils.validation import require, validate_country_code, validate_new_secret


class AccountOperations(BaseClient):
    """Operations on the account behind the configured credentials."""

    async def get_balance(self, *, callback: Optional[Continuation] = None) -> Outcome:
        """Retrieve the current account balance."""
        self._ensure_initialized()
        return await self._request(Endpoint.ACCOUNT_GET_BALANCE, callback=callback)

    async def get_pricing(
        self, country_code: str, *, callback: Optional[Continuation] = None
    ) -> Outcome:
        """Retrieve outbound pricing for a country.

        :param country_code: Two-letter country code
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            validate_country_code(country_code)
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.ACCOUNT_PRICING, {"country": country_code}, callback=callback
        )

    async def update_secret(
        self, new_secret: str, *, callback: Optional[Continuation] = None
    ) -> Outcome:
        """Replace the API secret (at most eight characters)."""
        self._ensure_initialized()
        try:
            validate_new_secret(new_secret)
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.ACCOUNT_SETTINGS,
            {"newSecret": new_secret},
            "POST",
            callback=callback,
        )

    async def update_mo_callback_url(
        self, new_url: str, *, callback: Optional[Continuation] = None
    ) -> Outcome:
        """Set the inbound message callback URL."""
        self._ensure_initialized()
        try:
            require(new_url, "invalidCallbackUrl", "new_url")
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.ACCOUNT_SETTINGS,
            {"moCallBackUrl": new_url},
            "POST",
            callback=callback,
        )

    async def update_dr_callback_url(
        self, new_url: str, *, callback: Optional[Continuation] = None
    ) -> Outcome:
        """Set the delivery receipt callback URL."""
        self._ensure_initialized()
        try:
            require(new_url, "invalidCallbackUrl", "new_url")
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.ACCOUNT_SETTINGS,
            {"drCallBackUrl": new_url},
            "POST",
            callback=callback,
        )

    async def top_up(
        self, transaction_id: str, *, callback: Optional[Continuation] = None
    ) -> Outcome:
        """Top up the account.

        Only available with auto-reload enabled; ``transaction_id`` is the id
        of the first auto-reload top-up.

        :param transaction_id: Auto-reload transaction id
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            require(transaction_id, "invalidTransactionId", "transaction_id")
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            Endpoint.ACCOUNT_TOP_UP, {"trx": transaction_id}, "POST", callback=callback
        )

    async def get_numbers(self, *, callback: Optional[Continuation] = None) -> Outcome:
        """List inbound numbers owned by the account."""
        self._ensure_initialized()
        return await self._request(Endpoint.ACCOUNT_NUMBERS, callback=callback)
