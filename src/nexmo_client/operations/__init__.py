"""Per-endpoint operations, grouped by API area."""

from .account import AccountOperations
from .messaging import MessagingOperations, classify_send_response
from .numbers import NumberOperations
from .search import SearchOperations

__all__ = [
    "AccountOperations",
    "MessagingOperations",
    "NumberOperations",
    "SearchOperations",
    "classify_send_response",
]
