from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class ProgressEvent(BaseModel):
    """Snapshot of an upload or download in flight.

    ``loaded`` and ``total`` are wire bytes. ``total`` is ``0`` when the
    length is unknown, in which case ``length_computable`` is ``False``.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        frozen=True,
    )

    length_computable: bool = Field(alias="lengthComputable")
    loaded: int = Field(ge=0)
    total: int = Field(default=0, ge=0)

    @property
    def fraction(self) -> float | None:
        if not self.length_computable or not self.total:
            return None
        return self.loaded / self.total


ProgressCallback = Callable[[ProgressEvent], None]
