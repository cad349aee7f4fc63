from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FormFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: Optional[str] = None
    content: bytes = b""
    content_type: Optional[str] = None


class FormData(BaseModel):
    """Multi-part form payload.

    Used both as a request body (always sent as ``multipart/form-data``) and as
    the decoded shape of ``formData`` responses.

    Examples:
        >>> form = FormData(fields={"title": "report"})
        >>> form = form.with_file("upload", "report.csv", b"a,b\\n1,2\\n", "text/csv")
    """

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    fields: Dict[str, str] = Field(default_factory=dict)
    files: Dict[str, FormFile] = Field(default_factory=dict)

    def with_file(
        self,
        name: str,
        filename: Optional[str],
        content: bytes,
        content_type: Optional[str] = None,
    ) -> "FormData":
        files = dict(self.files)
        files[name] = FormFile(
            filename=filename, content=content, content_type=content_type
        )
        return FormData(fields=dict(self.fields), files=files)

    def to_httpx_files(self) -> List[Tuple[str, Any]]:
        """Render every part as an httpx ``files`` entry.

        Plain fields are sent as parts without a filename so the body is
        multipart even when no file is attached.
        """
        parts: List[Tuple[str, Any]] = [
            (name, (None, value)) for name, value in self.fields.items()
        ]
        for name, file in self.files.items():
            if file.content_type:
                parts.append((name, (file.filename, file.content, file.content_type)))
            else:
                parts.append((name, (file.filename, file.content)))
        return parts

    def __len__(self) -> int:
        return len(self.fields) + len(self.files)
