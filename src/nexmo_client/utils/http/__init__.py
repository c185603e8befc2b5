"""HTTP utilities public API (barrel module).

This package provides:
- The request builder producing form-encoded Nexmo requests
- The response normalizer delivering one outcome per request

Recommended import pattern for consumers:
    from nexmo_client.utils.http import build_request, ResponseNormalizer
"""

from .normalizer import (
    Classifier,
    Continuation,
    ResponseNormalizer,
    ResponseState,
    invoke_continuation,
)
from .request import HTTPMethod, RequestDescription, build_request, encode_parameters

__all__ = [
    "HTTPMethod",
    "RequestDescription",
    "build_request",
    "encode_parameters",
    "Classifier",
    "Continuation",
    "ResponseNormalizer",
    "ResponseState",
    "invoke_continuation",
]
