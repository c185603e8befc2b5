"""Asynchronous client for the Nexmo SMS, voice and numbers REST API.

This package validates call arguments, builds form-encoded requests that
carry the account credentials, and normalizes every response (or
transport failure) into a single :class:`~nexmo_client.models.Outcome`
delivered exactly once to the caller.

:var __version__: Current package version
:type __version__: str
"""

__version__ = "0.1.0"

from .client import NexmoClient, initialize  # noqa: E402
from .endpoints import Endpoint  # noqa: E402
from .exceptions import (  # noqa: E402
    ApplicationError,
    ConfigurationError,
    DecodeError,
    NexmoClientError,
    NotInitializedError,
    TransportError,
    UnimplementedError,
    ValidationError,
)
from .models import (  # noqa: E402
    ClientConfig,
    NumberCallbackOptions,
    NumberSearchOptions,
    Outcome,
    OutcomeKind,
    WapPushOptions,
)

__all__ = [
    "__version__",
    "NexmoClient",
    "initialize",
    "Endpoint",
    "ClientConfig",
    "Outcome",
    "OutcomeKind",
    "WapPushOptions",
    "NumberSearchOptions",
    "NumberCallbackOptions",
    "NexmoClientError",
    "ConfigurationError",
    "NotInitializedError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "ApplicationError",
    "UnimplementedError",
]
