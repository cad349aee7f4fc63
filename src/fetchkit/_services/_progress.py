from typing import AsyncIterator, Optional

import httpx

from ..models.progress import ProgressCallback, ProgressEvent


def parse_content_length(value: Optional[str]) -> int:
    """Return the Content-Length as an int, or 0 when missing or invalid."""
    if not value:
        return 0
    try:
        length = int(value)
    except ValueError:
        return 0
    return max(length, 0)


class ProgressReporter:
    """Forwards byte counts to a caller callback as :class:`ProgressEvent`.

    ``loaded`` values that go backwards are dropped, and nothing is reported
    once the owning call has settled (``close``).
    """

    def __init__(self, callback: ProgressCallback) -> None:
        self._callback = callback
        self._last_loaded = -1
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def report(self, loaded: int, total: int = 0) -> None:
        if self._closed or loaded < self._last_loaded:
            return
        self._last_loaded = loaded

        length_computable = total > 0 and loaded <= total
        self._callback(
            ProgressEvent(
                length_computable=length_computable,
                loaded=loaded,
                total=total if length_computable else 0,
            )
        )

    def close(self) -> None:
        self._closed = True


class ProgressByteStream(httpx.AsyncByteStream):
    """Wraps an outgoing request stream and reports upload progress per chunk."""

    def __init__(
        self, stream: httpx.AsyncByteStream, reporter: ProgressReporter, total: int
    ) -> None:
        self._stream = stream
        self._reporter = reporter
        self._total = total
        self._sent = 0

    async def __aiter__(self) -> AsyncIterator[bytes]:
        async for chunk in self._stream:
            yield chunk
            self._sent += len(chunk)
            self._reporter.report(self._sent, self._total)

    async def aclose(self) -> None:
        await self._stream.aclose()
