"""Argument validators shared by the client operations.

Each validator raises :class:`~nexmo_client.exceptions.ValidationError`
with the code the caller sees; operations turn that into a continuation
call or let it propagate.
"""

from typing import Any, Optional, Sequence

from ..exceptions import ValidationError

COUNTRY_CODE_LENGTH = 2
MIN_MSISDN_LENGTH = 10
MAX_MESSAGE_IDS = 10
MAX_SECRET_LENGTH = 8


def require(value: Any, code: str, field: Optional[str] = None) -> None:
    """Reject empty or missing values.

    :param value: Value to check
    :param code: Error code raised when the value is falsy
    :param field: Argument name recorded on the error
    :raises ValidationError: If ``value`` is empty
    """
    if not value:
        raise ValidationError(code, field=field)


def validate_country_code(country_code: Optional[str]) -> None:
    """Accept only two-character country codes such as ``US``.

    :raises ValidationError: ``invalidCountryCode``
    """
    if not country_code or len(country_code) != COUNTRY_CODE_LENGTH:
        raise ValidationError(
            "invalidCountryCode", field="country_code", value=country_code
        )


def validate_msisdn(msisdn: Optional[str]) -> None:
    """Accept numbers of at least ten characters.

    :raises ValidationError: ``invalidMsisdn``
    """
    if not msisdn or len(str(msisdn)) < MIN_MSISDN_LENGTH:
        raise ValidationError("invalidMsisdn", field="msisdn", value=msisdn)


def validate_message_ids(message_ids: Optional[Sequence[str]]) -> None:
    """Accept between one and ten message ids.

    :raises ValidationError: ``invalidMessageId`` or ``tooManyMessageId``
    """
    if not message_ids:
        raise ValidationError("invalidMessageId", field="message_ids")
    if len(message_ids) > MAX_MESSAGE_IDS:
        raise ValidationError(
            "tooManyMessageId", field="message_ids", value=len(message_ids)
        )


def validate_new_secret(new_secret: Optional[str]) -> None:
    """Accept non-empty secrets of at most eight characters.

    :raises ValidationError: ``invalidNewSecret``
    """
    if not new_secret or len(new_secret) > MAX_SECRET_LENGTH:
        raise ValidationError("invalidNewSecret", field="new_secret")
