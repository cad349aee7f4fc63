from os import environ as env
from typing import Optional

from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_TIMEOUT_MS,
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
    ENV_TIMEOUT_MS,
    ENV_VERIFY_SSL,
)

_FALSY = {"0", "false", "no", "off"}


class Config(BaseModel):
    base_url: Optional[str] = None
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    access_token: Optional[str] = None
    verify_ssl: bool = True
    follow_redirects: bool = True

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Build a config from ``FETCHKIT_*`` environment variables.

        Keyword arguments that are not ``None`` take precedence over the
        environment.

        Raises:
            pydantic.ValidationError: If ``FETCHKIT_TIMEOUT_MS`` is not a
                positive integer.
        """
        values: dict = {}
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT_MS):
            values["timeout_ms"] = env[ENV_TIMEOUT_MS]
        if env.get(ENV_ACCESS_TOKEN):
            values["access_token"] = env[ENV_ACCESS_TOKEN]
        if env.get(ENV_VERIFY_SSL):
            values["verify_ssl"] = env[ENV_VERIFY_SSL].strip().lower() not in _FALSY

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
