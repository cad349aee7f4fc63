from os import environ as env
from typing import Optional, Protocol, runtime_checkable

from .constants import ENV_ACCESS_TOKEN


@runtime_checkable
class TokenSource(Protocol):
    """Read-only view on the current identity token."""

    def current_token(self) -> Optional[str]: ...


class StaticTokenSource:
    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token

    def current_token(self) -> Optional[str]:
        return self._token


class EnvTokenSource:
    """Reads the token from the environment on every call."""

    def __init__(self, variable: str = ENV_ACCESS_TOKEN) -> None:
        self.variable = variable

    def current_token(self) -> Optional[str]:
        return env.get(self.variable) or None


class TokenStore:
    """Mutable token holder shared between the login flow and the executor.

    The executor only ever reads from it; updates happen elsewhere in the
    application (e.g. after sign-in or sign-out).
    """

    def __init__(self, token: Optional[str] = None) -> None:
        self.token = token

    def current_token(self) -> Optional[str]:
        return self.token

    def update_token(self, token: Optional[str]) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None
