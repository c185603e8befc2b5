"""Credential redaction and secure logging setup.

Requests to Nexmo carry ``api_key`` and ``api_secret`` in the query string
or form body, so anything that might end up in a log line (URLs, parameter
mappings, formatted messages) goes through these helpers first.
"""

import copy
import logging
import re
import sys
from typing import Any, Dict, Iterable, Optional

# Parameter names whose values must never be logged
SENSITIVE_PARAMS = ("api_key", "api_secret", "newSecret")

SENSITIVE_PATTERNS = {
    name: re.compile(rf"({re.escape(name)}=)[^&\s]+", re.IGNORECASE)
    for name in SENSITIVE_PARAMS
}

SENSITIVE_HEADERS = {
    "authorization",
    "cookie",
    "set-cookie",
}

# =============================================================================
# String and Log Sanitization
# =============================================================================


def sanitize_url(url: str) -> str:
    """Redact credential values from a URL or form-encoded string.

    :param url: URL, query string or form body
    :type url: str
    :return: The same text with sensitive values replaced
    :rtype: str
    """
    if not url:
        return url
    for pattern in SENSITIVE_PATTERNS.values():
        url = pattern.sub(r"\1<REDACTED>", url)
    return url


def sanitize_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize HTTP headers for logging.

    :param headers: Dictionary of HTTP headers
    :type headers: Dict[str, Any]
    :return: Sanitized headers dictionary
    :rtype: Dict[str, Any]
    """
    if not headers:
        return headers
    sanitized = dict(headers)
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            sanitized[key] = "<REDACTED>"
    return sanitized


def safe_log_dict(
    data: Dict[str, Any], sanitize_keys: Optional[Iterable[str]] = None
) -> Dict[str, Any]:
    """Create a copy of a parameter mapping that is safe to log.

    :param data: Parameters or payload to sanitize
    :type data: Dict[str, Any]
    :param sanitize_keys: Additional keys to redact beyond the defaults
    :type sanitize_keys: Optional[Iterable[str]]
    :return: Sanitized copy
    :rtype: Dict[str, Any]
    """
    if not data:
        return data
    keys = {k.lower() for k in SENSITIVE_PARAMS}
    if sanitize_keys:
        keys.update(k.lower() for k in sanitize_keys)
    sanitized = copy.deepcopy(data)

    def _sanitize_nested(obj: Any) -> Any:
        if isinstance(obj, dict):
            for key, value in obj.items():
                if str(key).lower() in keys:
                    obj[key] = "<REDACTED>"
                elif isinstance(value, (dict, list)):
                    obj[key] = _sanitize_nested(value)
        elif isinstance(obj, list):
            return [_sanitize_nested(item) for item in obj]
        return obj

    return _sanitize_nested(sanitized)


# =============================================================================
# Secure Logging Setup
# =============================================================================


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts credentials from every log record."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with automatic sanitization.

        :param record: Log record to format
        :type record: logging.LogRecord
        :return: Sanitized log message
        :rtype: str
        """
        if record.args:
            try:
                record.msg = sanitize_url(record.msg % record.args)
                record.args = None
            except (TypeError, ValueError):
                record.msg = sanitize_url(str(record.msg))
        else:
            record.msg = sanitize_url(str(record.msg))
        return super().format(record)


_LOGGING_CONFIGURED = False


def setup_secure_logging(level: str = "INFO") -> None:
    """Set up root logging with credential redaction.

    Only the first call installs a handler; later calls are no-ops.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        logging.getLogger(__name__).debug(
            "Logging already configured, skipping duplicate setup"
        )
        return

    formatter = SanitizingFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )

    # httpx logs full request URLs (credentials included) at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _LOGGING_CONFIGURED = True
