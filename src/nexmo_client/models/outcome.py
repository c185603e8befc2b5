"""Normalized result of one API call.

Every operation produces exactly one :class:`Outcome`. Continuations see
it as the ``(error, result)`` pair returned by
:meth:`Outcome.callback_args`; a non-``None`` error is authoritative over
the shape of the result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from ..exceptions import NexmoClientError


class OutcomeKind(str, Enum):
    """The four ways a call can end."""

    SUCCESS = "success"
    TRANSPORT_FAILURE = "transport_failure"
    DECODE_FAILURE = "decode_failure"
    APPLICATION_ERROR = "application_error"


@dataclass(frozen=True)
class Outcome:
    """Tagged result of a single logical call.

    :param kind: Which variant this outcome is
    :param payload: Decoded JSON payload (success and application errors)
    :param error: Error for every non-success variant
    :param raw_body: Undecoded body text, set for decode failures
    """

    kind: OutcomeKind
    payload: Any = None
    error: Optional[NexmoClientError] = None
    raw_body: Optional[str] = None

    @classmethod
    def success(cls, payload: Any) -> "Outcome":
        return cls(kind=OutcomeKind.SUCCESS, payload=payload)

    @classmethod
    def transport_failure(cls, error: NexmoClientError) -> "Outcome":
        return cls(kind=OutcomeKind.TRANSPORT_FAILURE, error=error)

    @classmethod
    def decode_failure(cls, error: NexmoClientError, raw_body: str) -> "Outcome":
        return cls(kind=OutcomeKind.DECODE_FAILURE, error=error, raw_body=raw_body)

    @classmethod
    def application_error(
        cls, error: NexmoClientError, payload: Any = None
    ) -> "Outcome":
        return cls(kind=OutcomeKind.APPLICATION_ERROR, error=error, payload=payload)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    def callback_args(self) -> Tuple[Optional[NexmoClientError], Any]:
        """Return the ``(error, result)`` pair handed to continuations.

        Decode failures pass the raw body as a best-effort result; transport
        and application errors pass ``None``.

        :return: Error (or ``None``) and result
        :rtype: Tuple[Optional[NexmoClientError], Any]
        """
        if self.kind is OutcomeKind.SUCCESS:
            return None, self.payload
        if self.kind is OutcomeKind.DECODE_FAILURE:
            return self.error, self.raw_body
        return self.error, None
