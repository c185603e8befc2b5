"""Configuration state and request plumbing shared by every operation.

:class:`BaseClient` holds the client configuration, enforces the
initialization guard, and routes both network outcomes and argument
validation failures through the single-continuation contract.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from .endpoints import API_HOST, PLAINTEXT_PROTOCOL, Endpoint
from .exceptions import ConfigurationError, NexmoClientError, NotInitializedError
from .models.config import ClientConfig
from .models.outcome import Outcome
from .utils.http import (
    Classifier,
    Continuation,
    HTTPMethod,
    ResponseNormalizer,
    build_request,
    invoke_continuation,
)

logger = logging.getLogger(__name__)


class BaseClient:
    """Configuration holder and dispatcher for Nexmo operations.

    A client is usable once :meth:`initialize` has succeeded. Calling any
    operation before that raises :class:`NotInitializedError`.

    :param api_key: Optional API key; when given with ``api_secret`` the
        client is initialized immediately
    :type api_key: Optional[str]
    :param api_secret: Optional API secret
    :type api_secret: Optional[str]
    :param protocol: ``"http"`` for plaintext transport, anything else for HTTPS
    :type protocol: Optional[str]
    :param debug: Trace requests and responses at DEBUG level
    :type debug: bool
    :param host: Upstream API host
    :type host: str
    :param transport: Optional httpx transport used for every request
    :type transport: Optional[httpx.AsyncBaseTransport]
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        protocol: Optional[str] = None,
        debug: bool = False,
        *,
        host: str = API_HOST,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config: Optional[ClientConfig] = None
        self._transport = transport
        if api_key is not None or api_secret is not None:
            self.initialize(api_key, api_secret, protocol, debug, host=host)

    def initialize(
        self,
        api_key: Optional[str],
        api_secret: Optional[str],
        protocol: Optional[str] = None,
        debug: bool = False,
        *,
        host: str = API_HOST,
    ) -> "BaseClient":
        """Set credentials and transport, replacing any previous configuration.

        Re-initializing while calls are in flight is not guarded; in-flight
        calls keep the configuration they started with.

        :param api_key: Nexmo API key
        :type api_key: Optional[str]
        :param api_secret: Nexmo API secret
        :type api_secret: Optional[str]
        :param protocol: ``"http"`` selects port 80, anything else port 443
        :type protocol: Optional[str]
        :param debug: Trace requests and responses
        :type debug: bool
        :param host: Upstream API host
        :type host: str
        :return: The client itself
        :rtype: BaseClient
        :raises ConfigurationError: If the key or the secret is empty
        """
        if not api_key or not api_secret:
            raise ConfigurationError(
                setting="api_key" if not api_key else "api_secret"
            )

        self._config = ClientConfig(
            api_key=api_key,
            api_secret=api_secret,
            use_secure_transport=protocol != PLAINTEXT_PROTOCOL,
            debug=bool(debug),
            host=host,
        )
        logger.debug(
            "Nexmo client initialized (%s://%s:%d)",
            self._config.scheme,
            self._config.host,
            self._config.port,
        )
        return self

    @property
    def initialized(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> ClientConfig:
        """Current configuration.

        :raises NotInitializedError: If the client was never initialized
        """
        return self._ensure_initialized()

    def _ensure_initialized(self) -> ClientConfig:
        if self._config is None:
            raise NotInitializedError()
        return self._config

    async def _request(
        self,
        endpoint: Endpoint,
        parameters: Optional[Mapping[str, Any]] = None,
        method: HTTPMethod = "GET",
        *,
        callback: Optional[Continuation] = None,
        classifier: Optional[Classifier] = None,
    ) -> Outcome:
        config = self._ensure_initialized()
        request = build_request(config, endpoint.path, parameters, method)
        normalizer = ResponseNormalizer(
            request,
            transport=self._transport,
            classifier=classifier,
            debug=config.debug,
        )
        return await normalizer.run(callback)

    async def _reject(
        self, error: NexmoClientError, callback: Optional[Continuation]
    ) -> Outcome:
        """Report a failure detected before any request is built.

        With a continuation the error is delivered through it; without one
        it is raised to the caller.
        """
        if callback is None:
            raise error
        if self._config is not None and self._config.debug:
            logger.debug("Rejected call before sending: %s", error.message)
        outcome = Outcome.application_error(error)
        await invoke_continuation(callback, outcome)
        return outcome

    async def _deliver(
        self, error: NexmoClientError, callback: Optional[Continuation]
    ) -> Outcome:
        """Report a failure through the error channel without ever raising."""
        outcome = Outcome.application_error(error)
        await invoke_continuation(callback, outcome)
        return outcome
