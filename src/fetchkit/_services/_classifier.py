import logging
from typing import Any, Optional, Union

import httpx

from ..models.errors import (
    BusinessFault,
    ClassifiedError,
    HttpStatusFault,
    NetworkFault,
    RequestAborted,
)
from ..models.responses import BusinessStatus, RequestState
from .._utils._console import Notifier
from .._utils.constants import LOGGER_NAME
from ._decoder import RawResponse

_STATES: dict[type, RequestState] = {
    RequestAborted: RequestState.ABORTED,
    NetworkFault: RequestState.NETWORK_FAULT,
    HttpStatusFault: RequestState.HTTP_FAULT,
    BusinessFault: RequestState.BUSINESS_FAULT,
}


class ErrorClassifier:
    """Turns transport faults, HTTP statuses and business codes into errors.

    Precedence, highest first: cancellation, transport fault, non-2xx status,
    non-zero business code. ``report`` notifies exactly once per error; the
    caller is expected to re-raise it afterwards.
    """

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier
        self._logger = logging.getLogger(LOGGER_NAME)

    def classify_exception(
        self, exc: BaseException, timeout_ms: Optional[int] = None
    ) -> Optional[ClassifiedError]:
        if isinstance(exc, ClassifiedError):
            return exc
        # InvalidURL is raised while building the request, outside RequestError
        if isinstance(exc, (httpx.RequestError, httpx.InvalidURL)):
            return self.classify_transport_error(exc, timeout_ms)
        return None

    def classify_transport_error(
        self,
        exc: Union[httpx.RequestError, httpx.InvalidURL],
        timeout_ms: Optional[int] = None,
    ) -> ClassifiedError:
        if isinstance(exc, httpx.TimeoutException):
            return RequestAborted(timeout_ms)
        return NetworkFault(str(exc) or type(exc).__name__)

    def check_status(self, raw: RawResponse) -> None:
        if not raw.ok:
            raise HttpStatusFault(raw.status_code, raw.content)

    def check_business(self, data: Any) -> None:
        status = BusinessStatus.from_body(data)
        if status is not None and status.is_error:
            raise BusinessFault(status.code, status.message, data)

    def report(self, error: ClassifiedError) -> None:
        self._logger.warning(f"Request failed ({error.kind.value}): {error.notification}")
        self._notifier.notify(error.notification)

    @staticmethod
    def state_for(error: ClassifiedError) -> RequestState:
        for error_type, state in _STATES.items():
            if isinstance(error, error_type):
                return state
        raise TypeError(f"Unclassified error type: {type(error).__name__}")
