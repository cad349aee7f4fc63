from ._classifier import ErrorClassifier
from ._decoder import RawResponse, decode
from ._executor import RequestExecutor
from ._progress import ProgressByteStream, ProgressReporter
from ._timeout import CancellationToken, TimeoutController
from ._transports import (
    ProgressTransport,
    StreamingTransport,
    Transport,
    TransportKind,
    TransportSelector,
)

__all__ = [
    "CancellationToken",
    "ErrorClassifier",
    "ProgressByteStream",
    "ProgressReporter",
    "ProgressTransport",
    "RawResponse",
    "RequestExecutor",
    "StreamingTransport",
    "TimeoutController",
    "Transport",
    "TransportKind",
    "TransportSelector",
    "decode",
]
