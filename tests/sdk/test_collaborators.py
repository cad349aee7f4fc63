import logging

import pytest

from fetchkit import (
    ConsoleIndicator,
    ConsoleNotifier,
    EnvTokenSource,
    LoggingNotifier,
    Notifier,
    NullIndicator,
    StaticTokenSource,
    TokenSource,
    TokenStore,
    VisualIndicator,
)


class TestTokenSources:
    def test_static(self):
        assert StaticTokenSource("abc").current_token() == "abc"
        assert StaticTokenSource().current_token() is None

    def test_env_is_read_on_every_call(self, monkeypatch: pytest.MonkeyPatch):
        source = EnvTokenSource()
        assert source.current_token() is None

        monkeypatch.setenv("FETCHKIT_ACCESS_TOKEN", "from-env")
        assert source.current_token() == "from-env"

    def test_store(self):
        store = TokenStore()
        store.update_token("t1")
        assert store.current_token() == "t1"

        store.clear()
        assert store.current_token() is None

    @pytest.mark.parametrize(
        "source", [StaticTokenSource(), EnvTokenSource(), TokenStore()]
    )
    def test_protocol(self, source):
        assert isinstance(source, TokenSource)


class TestNotifiers:
    def test_logging_notifier(self, caplog):
        with caplog.at_level(logging.ERROR, logger="fetchkit"):
            LoggingNotifier().notify("Request timed out")

        assert caplog.records[-1].message == "Request timed out"
        assert caplog.records[-1].levelno == logging.ERROR

    def test_console_notifier_writes_stderr(self, capsys):
        ConsoleNotifier().notify("Unauthorized (401)")

        captured = capsys.readouterr()
        assert "Unauthorized (401)" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("notifier", [LoggingNotifier(), ConsoleNotifier()])
    def test_protocol(self, notifier):
        assert isinstance(notifier, Notifier)


class TestIndicators:
    def test_null_indicator(self):
        indicator = NullIndicator()
        indicator.start()
        indicator.stop()
        assert isinstance(indicator, VisualIndicator)

    def test_console_indicator_is_reference_counted(self):
        indicator = ConsoleIndicator("Loading")

        indicator.start()
        indicator.start()
        assert indicator.active == 2

        indicator.stop()
        assert indicator.active == 1

        indicator.stop()
        indicator.stop()
        assert indicator.active == 0

    def test_console_indicator_update(self):
        indicator = ConsoleIndicator("Loading")
        indicator.update("Downloading 10/20 bytes")

        assert indicator.message == "Downloading 10/20 bytes"
