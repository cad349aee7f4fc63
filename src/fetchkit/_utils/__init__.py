from ._auth import EnvTokenSource, StaticTokenSource, TokenSource, TokenStore
from ._console import (
    ConsoleIndicator,
    ConsoleNotifier,
    LoggingNotifier,
    Notifier,
    NullIndicator,
    VisualIndicator,
)
from ._headers import auth_header, build_headers
from ._request_spec import RequestBody, RequestSpec

__all__ = [
    "ConsoleIndicator",
    "ConsoleNotifier",
    "EnvTokenSource",
    "LoggingNotifier",
    "Notifier",
    "NullIndicator",
    "RequestBody",
    "RequestSpec",
    "StaticTokenSource",
    "TokenSource",
    "TokenStore",
    "VisualIndicator",
    "auth_header",
    "build_headers",
]
