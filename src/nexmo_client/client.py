"""Public Nexmo client.

Examples:
    >>> client = initialize("key", "secret")
    >>> outcome = await client.send_text_message("Acme", "447700900000", "hi")
    >>> outcome.ok
    True

    >>> def on_done(error, result):
    ...     print(error or result)
    >>> await client.get_balance(callback=on_done)
"""

from typing import Optional

import httpx

from .config.settings import Settings, get_settings
from .endpoints import API_HOST
from .operations import (
    AccountOperations,
    MessagingOperations,
    NumberOperations,
    SearchOperations,
)


class NexmoClient(
    MessagingOperations,
    AccountOperations,
    NumberOperations,
    SearchOperations,
):
    """Asynchronous client for the Nexmo REST API.

    Every operation is a coroutine that returns an
    :class:`~nexmo_client.models.Outcome` and, when a ``callback`` is
    given, also calls it exactly once with ``(error, result)``.
    Concurrent calls are independent; each opens its own connection.
    """

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "NexmoClient":
        """Build an initialized client from environment settings.

        :param settings: Settings to use, loaded from the environment if omitted
        :type settings: Optional[Settings]
        :param transport: Optional httpx transport
        :type transport: Optional[httpx.AsyncBaseTransport]
        :return: Initialized client
        :rtype: NexmoClient
        :raises ConfigurationError: If key or secret is not configured
        """
        settings = settings or get_settings()
        client = cls(transport=transport)
        client.initialize(
            settings.nexmo_api_key,
            settings.nexmo_api_secret,
            settings.nexmo_protocol,
            settings.nexmo_debug,
            host=settings.nexmo_api_host,
        )
        return client


def initialize(
    api_key: str,
    api_secret: str,
    protocol: Optional[str] = None,
    debug: bool = False,
    *,
    host: str = API_HOST,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NexmoClient:
    """Create and initialize a client.

    :param api_key: Nexmo API key
    :param api_secret: Nexmo API secret
    :param protocol: ``"http"`` for plaintext port 80, otherwise HTTPS on 443
    :param debug: Trace requests and responses at DEBUG level
    :param host: Upstream API host
    :param transport: Optional httpx transport
    :return: Initialized client
    :raises ConfigurationError: If the key or the secret is empty
    """
    client = NexmoClient(transport=transport)
    client.initialize(api_key, api_secret, protocol, debug, host=host)
    return client
