"""Environment-driven settings for the Nexmo client.

Settings are loaded from environment variables and an optional ``.env``
file. They only supply defaults for :meth:`NexmoClient.from_settings`;
a client built directly from arguments never reads the environment.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..endpoints import API_HOST


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    :param nexmo_api_key: Nexmo API key
    :type nexmo_api_key: Optional[str]
    :param nexmo_api_secret: Nexmo API secret
    :type nexmo_api_secret: Optional[str]
    :param nexmo_protocol: Transport protocol; ``http`` selects plaintext,
        anything else HTTPS
    :type nexmo_protocol: str
    :param nexmo_debug: Enable request/response tracing
    :type nexmo_debug: bool
    :param nexmo_api_host: Upstream API host
    :type nexmo_api_host: str
    :param log_level: Logging level for the CLI
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    nexmo_api_key: Optional[str] = Field(None, description="Nexmo API key")
    nexmo_api_secret: Optional[str] = Field(None, description="Nexmo API secret")
    nexmo_protocol: str = Field(
        "https", description="Transport protocol, only 'http' selects plaintext"
    )
    nexmo_debug: bool = Field(False, description="Trace requests and responses")
    nexmo_api_host: str = Field(API_HOST, description="Nexmo REST API host")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("nexmo_protocol", "log_level", mode="before")
    @classmethod
    def normalize_case(cls, v, info):
        """Accept protocol and log level in any case.

        :param v: Raw value from the environment
        :param info: Validation info
        :return: Lower-cased protocol or upper-cased log level
        """
        if not isinstance(v, str):
            return v
        v = v.strip()
        return v.lower() if info.field_name == "nexmo_protocol" else v.upper()


def get_settings() -> Settings:
    """Load a fresh settings instance from the current environment.

    :return: Settings read from environment and ``.env``
    :rtype: Settings
    """
    return Settings()
