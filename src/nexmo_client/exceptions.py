"""Structured exception classes for the Nexmo client."""

import json
from typing import Any, Dict, Optional

ERROR_MESSAGES: Dict[str, str] = {
    "initializeRequired": (
        "nexmo client not initialized, call initialize(api_key, api_secret) "
        "first before calling any nexmo API"
    ),
    "keyAndSecretRequired": "Key and secret cannot be empty",
    "invalidTextMessage": "Invalid text message",
    "invalidBody": "Invalid body value in binary message",
    "invalidUdh": "Invalid udh value in binary message",
    "invalidTitle": "Invalid title in WAP push message",
    "invalidUrl": "Invalid url in WAP push message",
    "invalidSender": "Invalid from address",
    "invalidRecipient": "Invalid to address",
    "invalidCountryCode": "Invalid country code",
    "invalidMsisdn": "Invalid MSISDN passed",
    "invalidMessageId": "Invalid message id(s)",
    "tooManyMessageId": "Too many message id",
    "invalidDate": "Invalid date value",
    "invalidNewSecret": "Invalid new secret",
    "invalidCallbackUrl": "Invalid callback url",
    "invalidTransactionId": "Invalid transaction id",
    "invalidJson": "Could not convert API response to JSON",
    "notImplemented": "Not yet implemented",
}


class NexmoClientError(Exception):
    """Base exception for all Nexmo client errors.

    Every error delivered to a continuation or raised by the client is an
    instance of this class, so callers can rely on ``code`` for
    programmatic handling and ``message`` for display.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class ConfigurationError(NexmoClientError):
    """Raised when the client is initialized without a key or secret.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: Optional[str] = None, setting: Optional[str] = None):
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(
            message=message or ERROR_MESSAGES["keyAndSecretRequired"],
            code="keyAndSecretRequired",
            details=details,
        )


class NotInitializedError(NexmoClientError):
    """Raised when an operation runs on a client that was never initialized."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message=message or ERROR_MESSAGES["initializeRequired"],
            code="initializeRequired",
        )


class ValidationError(NexmoClientError):
    """Raised when caller-supplied arguments are missing or malformed.

    The ``code`` is one of the keys of :data:`ERROR_MESSAGES`
    (``invalidSender``, ``tooManyMessageId`` ...), and the message is the
    matching text.

    :param code: Validation error code
    :param field: Optional name of the argument that failed validation
    :param value: Optional value that caused the validation failure
    """

    def __init__(
        self,
        code: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(
            message=ERROR_MESSAGES.get(code, code), code=code, details=details
        )
        self.field = field


class TransportError(NexmoClientError):
    """Raised when the HTTP exchange fails before a full response arrives.

    :param message: Description of the transport failure
    :param original_error: The underlying httpx error
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        details = {}
        if original_error is not None:
            details["original_error"] = str(original_error)
            details["error_type"] = type(original_error).__name__
        super().__init__(message=message, code="transportFailure", details=details)
        self.original_error = original_error


class DecodeError(NexmoClientError):
    """Raised when a response body cannot be decoded as JSON.

    The undecoded body is kept on ``raw_body`` so callers can still inspect
    plain-text error pages returned by the upstream service.

    :param raw_body: The full response body as text
    :param original_error: The JSON decoder error
    """

    def __init__(self, raw_body: str, original_error: Optional[Exception] = None):
        details: Dict[str, Any] = {"response_body": raw_body}
        if original_error is not None:
            details["original_error"] = str(original_error)
        super().__init__(
            message=ERROR_MESSAGES["invalidJson"], code="invalidJson", details=details
        )
        self.raw_body = raw_body
        self.original_error = original_error


class ApplicationError(NexmoClientError):
    """Raised when a well-formed response reports a failure.

    :param message: The upstream ``error-text``
    :param payload: The decoded response payload
    :param status: Optional upstream status code
    """

    def __init__(
        self,
        message: str,
        payload: Optional[Any] = None,
        status: Optional[int] = None,
    ):
        details = {}
        if status is not None:
            details["status"] = status
        super().__init__(message=message, code="applicationError", details=details)
        self.payload = payload
        self.status = status


class UnimplementedError(NexmoClientError):
    """Returned through the error channel by operations this client does not support.

    :param operation: Name of the unsupported operation
    """

    def __init__(self, operation: str):
        super().__init__(
            message=f"{ERROR_MESSAGES['notImplemented']}: {operation}",
            code="notImplemented",
            details={"operation": operation},
        )
        self.operation = operation
