"""Upstream host, headers and endpoint paths of the Nexmo REST API.

This module is the single source of truth for every URL path the client
talks to. Operations refer to endpoints by enum member, never by literal
path.
"""

from enum import Enum
from typing import Dict

API_HOST = "rest.nexmo.com"

SECURE_PORT = 443
PLAINTEXT_PORT = 80

# Value of the ``protocol`` argument that selects plaintext HTTP
PLAINTEXT_PROTOCOL = "http"

DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
}


class Endpoint(str, Enum):
    """Logical operation name to URL path mapping.

    Members are looked up by name (``Endpoint["SMS"]``) or used directly;
    ``value`` is the path sent on the wire.
    """

    SMS = "/sms/json"
    USSD = "/ussd/json"
    TTS = "/tts/json"
    ACCOUNT_GET_BALANCE = "/account/get-balance"
    ACCOUNT_PRICING = "/account/get-pricing/outbound"
    ACCOUNT_SETTINGS = "/account/settings"
    ACCOUNT_TOP_UP = "/account/top-up"
    ACCOUNT_NUMBERS = "/account/numbers"
    NUMBER_SEARCH = "/number/search"
    NUMBER_BUY = "/number/buy"
    NUMBER_CANCEL = "/number/cancel"
    NUMBER_UPDATE = "/number/update"
    SEARCH_MESSAGE = "/search/message"
    SEARCH_MESSAGES = "/search/messages"
    SEARCH_REJECTIONS = "/search/rejections"

    @property
    def path(self) -> str:
        return self.value
