"""Option structures for operations with optional arguments."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# Two days, in milliseconds
DEFAULT_WAP_PUSH_VALIDITY = 172800000


class WapPushOptions(BaseModel):
    """Optional settings for a WAP push message.

    :param validity: How long the WAP push is available, in milliseconds
    :type validity: int
    """

    validity: int = Field(DEFAULT_WAP_PUSH_VALIDITY, gt=0)


class NumberSearchOptions(BaseModel):
    """Optional filters for an inbound number search.

    :param pattern: Number pattern to match
    :type pattern: Optional[str]
    :param index: Page index, starting at 1
    :type index: Optional[int]
    :param size: Page size, at most 100
    :type size: Optional[int]
    """

    pattern: Optional[str] = None
    index: Optional[int] = Field(None, ge=1)
    size: Optional[int] = Field(None, ge=1, le=100)

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class NumberCallbackOptions(BaseModel):
    """Optional settings when updating an inbound number.

    :param callback_url: Inbound callback URL for the number
    :type callback_url: Optional[str]
    :param sys_type: Associated system type, SMPP clients only
    :type sys_type: Optional[str]
    """

    callback_url: Optional[str] = None
    sys_type: Optional[str] = None
