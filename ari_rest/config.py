#
# Copyright (c) 2013, Digium, Inc.
#

"""Connection settings for the ARI REST client.
"""

from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Where and how to reach Asterisk.

    Values not given explicitly are read from ``ARI_*`` environment
    variables (``ARI_HOST``, ``ARI_PORT``, ...), then fall back to the
    defaults below. Instances are immutable.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARI_",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    host: str = Field(default="localhost", min_length=1)
    port: int = Field(default=8088, ge=1, le=65535)
    prefix: Optional[str] = None
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    proxy: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("prefix")
    @classmethod
    def strip_prefix(cls, v):
        if v is None:
            return None
        v = v.strip("/")
        return v or None

    @property
    def scheme(self):
        return "https" if self.port == 443 else "http"

    @property
    def base_url(self):
        host = self.host
        # IPv6 literals need brackets in a URL
        if ":" in host and not host.startswith("["):
            host = "[%s]" % host
        return "%s://%s:%d" % (self.scheme, host, self.port)

    @property
    def auth(self):
        """(username, password), or None unless both are set.
        """
        if self.username and self.password:
            return self.username, self.password.get_secret_value()
        return None

    @classmethod
    def from_env(cls):
        return cls()

