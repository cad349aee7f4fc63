"""Async HTTP request wrapper with timeouts, progress and layered errors."""

from ._config import Config
from ._services import RequestExecutor, TransportKind
from ._utils import (
    ConsoleIndicator,
    ConsoleNotifier,
    EnvTokenSource,
    LoggingNotifier,
    Notifier,
    NullIndicator,
    RequestSpec,
    StaticTokenSource,
    TokenSource,
    TokenStore,
    VisualIndicator,
)
from .models import (
    Blob,
    BusinessFault,
    ClassifiedError,
    DecodeFault,
    ErrorKind,
    FormData,
    FormFile,
    HttpStatusFault,
    NetworkFault,
    ProgressEvent,
    RequestAborted,
    RequestError,
    RequestState,
    ResponseType,
)

__all__ = [
    "Blob",
    "BusinessFault",
    "ClassifiedError",
    "Config",
    "ConsoleIndicator",
    "ConsoleNotifier",
    "DecodeFault",
    "EnvTokenSource",
    "ErrorKind",
    "FormData",
    "FormFile",
    "HttpStatusFault",
    "LoggingNotifier",
    "NetworkFault",
    "Notifier",
    "NullIndicator",
    "ProgressEvent",
    "RequestAborted",
    "RequestError",
    "RequestExecutor",
    "RequestSpec",
    "RequestState",
    "ResponseType",
    "StaticTokenSource",
    "TokenSource",
    "TokenStore",
    "TransportKind",
    "VisualIndicator",
]
