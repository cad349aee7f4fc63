import logging
from typing import Optional, Protocol, runtime_checkable

import click
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner as RichSpinner
from rich.text import Text

from .constants import LOGGER_NAME


@runtime_checkable
class VisualIndicator(Protocol):
    """Page-level busy indicator, started and stopped once per request."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """User-visible message surface for classified failures."""

    def notify(self, text: str) -> None: ...


class NullIndicator:
    def start(self) -> None:
        pass

    def stop(self) -> None:
        pass


class LoggingNotifier:
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def notify(self, text: str) -> None:
        self._logger.error(text)


class ConsoleNotifier:
    """Writes one red error line to stderr per notification."""

    def notify(self, text: str) -> None:
        click.echo(f"❌ {click.style(text, fg='red')}", err=True)


class ConsoleIndicator:
    """Terminal spinner shared by all in-flight requests.

    The spinner is shown while at least one request is running: the first
    ``start`` shows it and the matching last ``stop`` hides it.
    """

    def __init__(self, message: str = "Requesting...", console: Optional[Console] = None):
        self.message = message
        self._console = console or Console(stderr=True)
        self._spinner = RichSpinner("dots", Text(message))
        self._live: Optional[Live] = None
        self._active = 0

    @property
    def active(self) -> int:
        return self._active

    def start(self) -> None:
        self._active += 1
        if self._active > 1:
            return

        self._live = Live(
            self._spinner,
            console=self._console,
            refresh_per_second=10,
            transient=True,
            auto_refresh=True,
        )
        self._live.start()

    def stop(self) -> None:
        if self._active == 0:
            return
        self._active -= 1
        if self._active == 0 and self._live:
            self._live.stop()
            self._live = None

    def update(self, message: str) -> None:
        self.message = message
        self._spinner.text = Text(message)
