from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..models.form_data import FormData
from ..models.progress import ProgressCallback
from ..models.responses import ResponseType
from .constants import DEFAULT_TIMEOUT_MS

RequestBody = Union[bytes, str, Mapping[str, Any], list, FormData, None]


@dataclass
class RequestSpec:
    """Encapsulates a single request issued through the executor.

    A spec is built per call and consumed once. ``body`` is sent raw when it is
    ``bytes``/``str``, JSON-encoded when it is a mapping or list, and as
    ``multipart/form-data`` when it is a :class:`FormData`.

    Raises:
        ValueError: If ``timeout_ms`` is not positive or ``response_type`` is
            not one of the supported response types.
    """

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: RequestBody = None
    params: dict[str, Any] = field(default_factory=dict)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    response_type: ResponseType = ResponseType.JSON
    on_upload_progress: Optional[ProgressCallback] = None
    on_download_progress: Optional[ProgressCallback] = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise ValueError(f"timeout_ms must be an integer, got {self.timeout_ms!r}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
        try:
            self.response_type = ResponseType(self.response_type)
        except ValueError:
            allowed = ", ".join(t.value for t in ResponseType)
            raise ValueError(
                f"Unknown response_type '{self.response_type}'. Allowed: {allowed}"
            ) from None

    @property
    def is_multipart(self) -> bool:
        return isinstance(self.body, FormData)

    def content_kwargs(self) -> dict[str, Any]:
        """Keyword arguments describing the body for ``httpx.Client.build_request``."""
        if self.body is None:
            return {}
        if isinstance(self.body, FormData):
            return {"files": self.body.to_httpx_files()}
        if isinstance(self.body, (bytes, str)):
            return {"content": self.body}
        return {"json": self.body}
