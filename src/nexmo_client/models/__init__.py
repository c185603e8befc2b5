"""Data models used by the Nexmo client.

Exports:
- ClientConfig: credentials and transport settings
- Outcome / OutcomeKind: normalized result of one call
- WapPushOptions, NumberSearchOptions, NumberCallbackOptions: optional
  operation arguments
"""

from .config import ClientConfig
from .options import (
    DEFAULT_WAP_PUSH_VALIDITY,
    NumberCallbackOptions,
    NumberSearchOptions,
    WapPushOptions,
)
from .outcome import Outcome, OutcomeKind

__all__ = [
    "ClientConfig",
    "Outcome",
    "OutcomeKind",
    "DEFAULT_WAP_PUSH_VALIDITY",
    "WapPushOptions",
    "NumberSearchOptions",
    "NumberCallbackOptions",
]
