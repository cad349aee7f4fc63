from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import httpx

from .._utils._request_spec import RequestSpec
from .._utils.constants import HEADER_CONTENT_LENGTH
from ._decoder import RawResponse
from ._progress import ProgressByteStream, ProgressReporter, parse_content_length
from ._timeout import CancellationToken


class TransportKind(str, Enum):
    STREAMING = "streaming"
    PROGRESS = "progress"


class Transport(ABC):
    """Issues one request and returns the fully read response."""

    kind: TransportKind

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(
        self,
        spec: RequestSpec,
        token: CancellationToken,
        headers: dict[str, str],
    ) -> RawResponse:
        reporter = self._reporter_for(spec)
        try:
            return await token.guard(self._exchange(spec, headers, reporter))
        finally:
            if reporter is not None:
                reporter.close()

    def _build_request(self, spec: RequestSpec, headers: dict[str, str]) -> httpx.Request:
        return self._client.build_request(
            spec.method,
            spec.url,
            headers=headers,
            params=spec.params or None,
            **spec.content_kwargs(),
        )

    @abstractmethod
    def _reporter_for(self, spec: RequestSpec) -> Optional[ProgressReporter]: ...

    @abstractmethod
    async def _exchange(
        self,
        spec: RequestSpec,
        headers: dict[str, str],
        reporter: Optional[ProgressReporter],
    ) -> RawResponse: ...


class StreamingTransport(Transport):
    """Default transport.

    With a download-progress callback the body is read chunk by chunk and
    always decoded as JSON; without one it is read in a single pass and
    decoded according to the declared response type.
    """

    kind = TransportKind.STREAMING

    def _reporter_for(self, spec: RequestSpec) -> Optional[ProgressReporter]:
        if spec.on_download_progress is None:
            return None
        return ProgressReporter(spec.on_download_progress)

    async def _exchange(
        self,
        spec: RequestSpec,
        headers: dict[str, str],
        reporter: Optional[ProgressReporter],
    ) -> RawResponse:
        request = self._build_request(spec, headers)
        response = await self._client.send(request, stream=True)
        try:
            if reporter is None:
                content = await response.aread()
            else:
                content = await self._read_with_progress(response, reporter)
        finally:
            await response.aclose()

        return RawResponse(
            status_code=response.status_code,
            headers=response.headers,
            content=content,
            json_only=reporter is not None,
        )

    async def _read_with_progress(
        self, response: httpx.Response, reporter: ProgressReporter
    ) -> bytes:
        total = parse_content_length(response.headers.get(HEADER_CONTENT_LENGTH))
        chunks: list[bytes] = []
        async for chunk in response.aiter_bytes():
            chunks.append(chunk)
            # wire bytes, so the count is comparable with Content-Length
            reporter.report(response.num_bytes_downloaded, total)
        return b"".join(chunks)


class ProgressTransport(Transport):
    """Upload transport for multi-part bodies with an upload-progress callback.

    Download progress and the declared response type are not honoured here:
    the response is always decoded as JSON.
    """

    kind = TransportKind.PROGRESS

    def _reporter_for(self, spec: RequestSpec) -> Optional[ProgressReporter]:
        if spec.on_upload_progress is None:
            return None
        return ProgressReporter(spec.on_upload_progress)

    async def _exchange(
        self,
        spec: RequestSpec,
        headers: dict[str, str],
        reporter: Optional[ProgressReporter],
    ) -> RawResponse:
        request = self._build_request(spec, headers)
        if reporter is not None:
            total = parse_content_length(request.headers.get(HEADER_CONTENT_LENGTH))
            request.stream = ProgressByteStream(request.stream, reporter, total)  # type: ignore[arg-type]

        response = await self._client.send(request)
        return RawResponse(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
            json_only=True,
        )


class TransportSelector:
    """Chooses the transport for a request before it is dispatched."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.streaming = StreamingTransport(client)
        self.progress = ProgressTransport(client)

    @staticmethod
    def kind_for(spec: RequestSpec) -> TransportKind:
        if spec.on_upload_progress is not None and spec.is_multipart:
            return TransportKind.PROGRESS
        return TransportKind.STREAMING

    def select(self, spec: RequestSpec) -> Transport:
        if self.kind_for(spec) is TransportKind.PROGRESS:
            return self.progress
        return self.streaming
