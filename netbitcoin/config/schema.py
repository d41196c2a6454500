"""Configuration schema using Pydantic.

Persisted to ~/.netbitcoin/config.json; ``NETBITCOIN_*`` environment variables
fill in anything the file does not set.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from netbitcoin.types import Credentials


class RpcConfig(BaseSettings):
    """Connection settings for one daemon."""
    model_config = SettingsConfigDict(env_prefix="NETBITCOIN_", extra="ignore")

    url: str = "http://127.0.0.1:8332"
    username: str = ""
    password: str = Field(default="", repr=False)
    timeout_seconds: float | None = Field(default=None, gt=0)  # None: httpx default
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def to_credentials(self) -> Credentials:
        """Build immutable call credentials; raises InvalidEndpointError for a bad url."""
        return Credentials(url=self.url, username=self.username, password=self.password)
