import asyncio
from typing import Any, Awaitable, Optional, TypeVar

from ..models.errors import RequestAborted

T = TypeVar("T")


class CancellationToken:
    """Shared signal that tells an in-flight transport to abort."""

    def __init__(self, timeout_ms: Optional[int] = None) -> None:
        self.timeout_ms = timeout_ms
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """Run ``awaitable`` until it finishes or the token is cancelled.

        On cancellation the underlying task is cancelled and awaited, so
        whatever I/O it was doing is torn down before this returns.

        Raises:
            RequestAborted: If the token fired before ``awaitable`` finished.
        """
        if self.cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise RequestAborted(self.timeout_ms)

        task: asyncio.Future[Any] = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait(
                {task, waiter}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        if task in done:
            return task.result()

        task.cancel()
        # the transport lost the race; its outcome no longer matters
        await asyncio.gather(task, return_exceptions=True)
        raise RequestAborted(self.timeout_ms)


class TimeoutController:
    """Arms a timer that cancels a fresh token after ``timeout_ms``.

    Use as a context manager around one call: the timer is disarmed on exit so
    a late firing can never affect a later call.

    Examples:
        >>> with TimeoutController(5000) as token:
        ...     response = await token.guard(send())
    """

    def __init__(self, timeout_ms: int) -> None:
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        self.timeout_ms = timeout_ms
        self.token: Optional[CancellationToken] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    def __enter__(self) -> CancellationToken:
        loop = asyncio.get_running_loop()
        self.token = CancellationToken(self.timeout_ms)
        self._handle = loop.call_later(self.timeout_ms / 1000, self.token.cancel)
        return self.token

    def __exit__(self, *exc_info: Any) -> None:
        self.disarm()

    def disarm(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def armed(self) -> bool:
        return self._handle is not None
