"""Client configuration model."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from ..endpoints import API_HOST, PLAINTEXT_PORT, SECURE_PORT


class ClientConfig(BaseModel):
    """Credentials and transport settings shared by every call of a client.

    A config is immutable once built; re-initializing a client replaces it
    wholesale.

    :param api_key: Nexmo API key
    :type api_key: str
    :param api_secret: Nexmo API secret
    :type api_secret: str
    :param use_secure_transport: Use HTTPS on port 443 (otherwise HTTP on 80)
    :type use_secure_transport: bool
    :param debug: Emit request/response tracing at DEBUG level
    :type debug: bool
    :param host: Upstream API host
    :type host: str
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1)
    api_secret: str = Field(..., min_length=1, repr=False)
    use_secure_transport: bool = True
    debug: bool = False
    host: str = API_HOST

    @property
    def scheme(self) -> str:
        return "https" if self.use_secure_transport else "http"

    @property
    def port(self) -> int:
        return SECURE_PORT if self.use_secure_transport else PLAINTEXT_PORT

    def credentials(self) -> Dict[str, str]:
        """Return the credential pair in wire form.

        :return: ``api_key`` and ``api_secret`` fields
        :rtype: Dict[str, str]
        """
        return {"api_key": self.api_key, "api_secret": self.api_secret}
