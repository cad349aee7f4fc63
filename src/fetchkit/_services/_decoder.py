import json
from dataclasses import dataclass
from email import policy
from email.parser import BytesParser
from typing import Any, Optional, Union
from urllib.parse import parse_qsl

import httpx

from ..models.errors import DecodeFault
from ..models.form_data import FormData, FormFile
from ..models.responses import Blob, ResponseType
from .._utils.constants import HEADER_CONTENT_TYPE


@dataclass
class RawResponse:
    """Fully read response, before decoding.

    ``json_only`` is set by transports that ignore the declared response type
    and always decode the body as JSON (the progress paths).
    """

    status_code: int
    headers: httpx.Headers
    content: bytes
    json_only: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str:
        return self.headers.get(HEADER_CONTENT_TYPE, "")


def _decode_json(raw: RawResponse) -> Any:
    try:
        return json.loads(raw.content)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeFault(ResponseType.JSON.value, str(e)) from e


def _decode_text(raw: RawResponse) -> str:
    # content is already decompressed, only the charset matters here
    response = httpx.Response(
        raw.status_code,
        headers={HEADER_CONTENT_TYPE: raw.content_type},
        content=raw.content,
    )
    return response.text


def _decode_form_data(raw: RawResponse) -> FormData:
    mime_type = raw.content_type.split(";", 1)[0].strip().lower()

    if mime_type == "application/x-www-form-urlencoded":
        try:
            pairs = parse_qsl(raw.content.decode("utf-8"), keep_blank_values=True)
        except UnicodeDecodeError as e:
            raise DecodeFault(ResponseType.FORM_DATA.value, str(e)) from e
        return FormData(fields=dict(pairs))

    if mime_type == "multipart/form-data":
        envelope = (
            f"{HEADER_CONTENT_TYPE}: {raw.content_type}\r\n\r\n".encode("latin-1")
            + raw.content
        )
        message = BytesParser(policy=policy.HTTP).parsebytes(envelope)
        if not message.is_multipart():
            raise DecodeFault(ResponseType.FORM_DATA.value, "malformed multipart body")

        form = FormData()
        for part in message.iter_parts():
            name = part.get_param("name", header="content-disposition")
            if name is None:
                raise DecodeFault(
                    ResponseType.FORM_DATA.value, "multipart part without a name"
                )
            payload = part.get_payload(decode=True) or b""
            filename = part.get_filename()
            if filename is None:
                charset = part.get_content_charset() or "utf-8"
                form.fields[name] = payload.decode(charset, errors="replace")
            else:
                form.files[name] = FormFile(
                    filename=filename,
                    content=payload,
                    content_type=part.get_content_type(),
                )
        return form

    raise DecodeFault(
        ResponseType.FORM_DATA.value,
        f"unsupported content type '{raw.content_type or 'none'}'",
    )


def decode(raw: RawResponse, response_type: Optional[Union[ResponseType, str]]) -> Any:
    """Decode a completed response body into the declared shape.

    Unknown or missing response types fall back to JSON. Bodies flagged
    ``json_only`` are always decoded as JSON.

    Raises:
        DecodeFault: If the body does not match the response type.
    """
    if raw.json_only:
        return _decode_json(raw)

    try:
        kind = ResponseType(response_type)
    except ValueError:
        kind = ResponseType.JSON

    if kind is ResponseType.TEXT:
        return _decode_text(raw)
    if kind is ResponseType.BLOB:
        return Blob(content=raw.content, content_type=raw.content_type)
    if kind is ResponseType.ARRAY_BUFFER:
        return raw.content
    if kind is ResponseType.FORM_DATA:
        return _decode_form_data(raw)
    return _decode_json(raw)
