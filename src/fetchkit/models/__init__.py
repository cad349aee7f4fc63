from .errors import (
    BusinessFault,
    ClassifiedError,
    DecodeFault,
    ErrorKind,
    HttpStatusFault,
    NetworkFault,
    RequestAborted,
    RequestError,
)
from .form_data import FormData, FormFile
from .progress import ProgressCallback, ProgressEvent
from .responses import Blob, BusinessStatus, RequestState, ResponseType

__all__ = [
    "Blob",
    "BusinessFault",
    "BusinessStatus",
    "ClassifiedError",
    "DecodeFault",
    "ErrorKind",
    "FormData",
    "FormFile",
    "HttpStatusFault",
    "NetworkFault",
    "ProgressCallback",
    "ProgressEvent",
    "RequestAborted",
    "RequestError",
    "RequestState",
    "ResponseType",
]
