from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseType(str, Enum):
    JSON = "json"
    TEXT = "text"
    BLOB = "blob"
    ARRAY_BUFFER = "arrayBuffer"
    FORM_DATA = "formData"


class RequestState(str, Enum):
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    ABORTED = "aborted"
    NETWORK_FAULT = "network_fault"
    HTTP_FAULT = "http_fault"
    BUSINESS_FAULT = "business_fault"


class Blob(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: bytes
    content_type: str = ""

    @property
    def size(self) -> int:
        return len(self.content)


class BusinessStatus(BaseModel):
    """Application status embedded in a JSON body as ``{code, message}``."""

    model_config = ConfigDict(extra="allow")

    code: Any = None
    message: str = Field(default="")

    @property
    def is_error(self) -> bool:
        return bool(self.code) and self.code != 0

    @classmethod
    def from_body(cls, body: Any) -> Optional["BusinessStatus"]:
        if not isinstance(body, dict) or "code" not in body:
            return None
        message = body.get("message")
        return cls(code=body["code"], message="" if message is None else str(message))
