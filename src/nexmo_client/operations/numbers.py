"""Inbound number operations: search, buy, cancel and update."""

from typing import Any, Dict, Optional

from ..core import BaseClient
from ..endpoints import Endpoint
from ..exceptions import UnimplementedError, ValidationError
from ..models.options import NumberCallbackOptions, NumberSearchOptions
from ..models.outcome import Outcome
from ..utils.http import Continuation
from ..utils.validation import validate_country_code, validate_msisdn


class NumberOperations(BaseClient):
    """Search for, purchase and release inbound numbers."""

    async def search_numbers(
        self,
        country_code: str,
        options: Optional[NumberSearchOptions] = None,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Search available inbound numbers in a country.

        :param country_code: Two-letter country code
        :param options: Optional pattern, page index and page size
        :param callback: Optional ``(error, result)`` continuation
        :return: Normalized outcome
        """
        self._ensure_initialized()
        try:
            validate_country_code(country_code)
        except ValidationError as e:
            return await self._reject(e, callback)

        data: Dict[str, Any] = {"country": country_code}
        if options is not None:
            data.update(options.to_params())
        return await self._request(Endpoint.NUMBER_SEARCH, data, callback=callback)

    async def buy_number(
        self,
        country_code: str,
        msisdn: str,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Purchase an available inbound number."""
        return await self._number_change(
            Endpoint.NUMBER_BUY, country_code, msisdn, callback
        )

    async def cancel_number(
        self,
        country_code: str,
        msisdn: str,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Cancel the subscription of one of the account's inbound numbers."""
        return await self._number_change(
            Endpoint.NUMBER_CANCEL, country_code, msisdn, callback
        )

    async def update_number_callback(
        self,
        country_code: str,
        msisdn: str,
        options: Optional[NumberCallbackOptions] = None,
        *,
        callback: Optional[Continuation] = None,
    ) -> Outcome:
        """Update the callback of an inbound number.

        Not supported yet: always reports :class:`UnimplementedError`
        through the error channel, with or without a continuation.
        """
        self._ensure_initialized()
        return await self._deliver(
            UnimplementedError("update_number_callback"), callback
        )

    async def _number_change(
        self,
        endpoint: Endpoint,
        country_code: str,
        msisdn: str,
        callback: Optional[Continuation],
    ) -> Outcome:
        self._ensure_initialized()
        try:
            validate_country_code(country_code)
            validate_msisdn(msisdn)
        except ValidationError as e:
            return await self._reject(e, callback)

        return await self._request(
            endpoint,
            {"country": country_code, "msisdn": msisdn},
            "POST",
            callback=callback,
        )
