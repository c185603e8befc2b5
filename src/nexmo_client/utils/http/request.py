"""Request builder for the Nexmo REST API.

This module turns an endpoint path and a parameter mapping into a fully
formed, form-encoded request. Building is a pure data transformation;
all failures happen later, during transport I/O.
"""

import logging
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

import httpx
from pydantic import BaseModel, Field

from ... import __version__
from ...endpoints import DEFAULT_HEADERS
from ...models.config import ClientConfig

logger = logging.getLogger(__name__)

HTTPMethod = Literal["GET", "POST"]

_CREDENTIAL_FIELDS = ("api_key", "api_secret")


class RequestDescription(BaseModel):
    """Wire-level description of one outbound request.

    :param method: HTTP method
    :type method: Literal["GET", "POST"]
    :param scheme: ``https`` or ``http``
    :type scheme: str
    :param host: Upstream host
    :type host: str
    :param port: 443 for secure transport, 80 otherwise
    :type port: int
    :param path: Endpoint path, including the query string for GET
    :type path: str
    :param headers: Request headers
    :type headers: Dict[str, str]
    :param body: Form-encoded body (empty for GET)
    :type body: bytes
    """

    method: HTTPMethod
    scheme: str
    host: str
    port: int
    path: str
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}{self.path}"

    def fields(self) -> Dict[str, Any]:
        """Decode the form fields carried by the query string or body.

        Repeated keys are collected into a list.

        :return: Field name to value mapping
        :rtype: Dict[str, Any]
        """
        if self.method == "POST":
            encoded = self.body.decode("utf-8")
        else:
            encoded = urlsplit(self.path).query
        fields: Dict[str, Any] = {}
        for key, value in parse_qsl(encoded, keep_blank_values=True):
            if key in fields:
                if not isinstance(fields[key], list):
                    fields[key] = [fields[key]]
                fields[key].append(value)
            else:
                fields[key] = value
        return fields

    def to_httpx(self) -> httpx.Request:
        """Convert to an ``httpx.Request`` ready to be sent.

        :return: Equivalent httpx request
        :rtype: httpx.Request
        """
        return httpx.Request(
            self.method,
            self.url,
            headers=self.headers,
            content=self.body if self.method == "POST" else None,
        )


def encode_parameters(
    credentials: Mapping[str, str], parameters: Optional[Mapping[str, Any]] = None
) -> str:
    """URL-encode credentials followed by caller parameters.

    Parameters whose value is ``None`` are skipped, list values become
    repeated keys, and caller parameters named like a credential field
    are dropped so credentials can never be overridden.

    :param credentials: ``api_key`` / ``api_secret`` pair
    :type credentials: Mapping[str, str]
    :param parameters: Operation-specific parameters
    :type parameters: Optional[Mapping[str, Any]]
    :return: Encoded ``key=value`` pairs joined with ``&``
    :rtype: str
    """
    pairs: List[Tuple[str, Any]] = list(credentials.items())
    for key, value in (parameters or {}).items():
        if key in _CREDENTIAL_FIELDS:
            logger.warning("Ignoring caller-supplied credential field %r", key)
            continue
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, item) for item in value)
        else:
            pairs.append((key, value))
    return urlencode(pairs)


def build_request(
    config: ClientConfig,
    endpoint_path: str,
    parameters: Optional[Mapping[str, Any]] = None,
    method: HTTPMethod = "GET",
) -> RequestDescription:
    """Build the outbound request for one API call.

    GET requests carry credentials and parameters in the query string.
    POST requests carry them as a form body with a ``Content-Length``
    sized to the encoded bytes.

    :param config: Client configuration supplying credentials and transport
    :type config: ClientConfig
    :param endpoint_path: Endpoint URL path
    :type endpoint_path: str
    :param parameters: Optional operation parameters
    :type parameters: Optional[Mapping[str, Any]]
    :param method: ``GET`` or ``POST``
    :type method: Literal["GET", "POST"]
    :return: Request description
    :rtype: RequestDescription
    :raises ValueError: If the method is not GET or POST
    """
    method = method.upper()
    if method not in ("GET", "POST"):
        raise ValueError(f"Unsupported HTTP method: {method}")

    encoded = encode_parameters(config.credentials(), parameters)
    headers = dict(DEFAULT_HEADERS)
    headers["User-Agent"] = f"nexmo-client/{__version__}"

    if method == "POST":
        body = encoded.encode("utf-8")
        headers["Content-Length"] = str(len(body))
        path = endpoint_path
    else:
        body = b""
        path = f"{endpoint_path}?{encoded}"

    return RequestDescription(
        method=method,
        scheme=config.scheme,
        host=config.host,
        port=config.port,
        path=path,
        headers=headers,
        body=body,
    )
