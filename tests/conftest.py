import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio

# Ensure local source package (src/fetchkit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from fetchkit import Config, RequestExecutor, TokenStore  # noqa: E402


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, text: str) -> None:
        self.messages.append(text)


class RecordingIndicator:
    def __init__(self) -> None:
        self.starts = 0
        self.stops = 0

    def start(self) -> None:
        self.starts += 1

    def stop(self) -> None:
        self.stops += 1


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "FETCHKIT_BASE_URL",
        "FETCHKIT_TIMEOUT_MS",
        "FETCHKIT_ACCESS_TOKEN",
        "FETCHKIT_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.test"


@pytest.fixture
def secret() -> str:
    return "secret-token"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def indicator() -> RecordingIndicator:
    return RecordingIndicator()


@pytest.fixture
def token_store(secret: str) -> TokenStore:
    return TokenStore(secret)


@pytest_asyncio.fixture
async def executor(
    config: Config,
    token_store: TokenStore,
    notifier: RecordingNotifier,
    indicator: RecordingIndicator,
) -> AsyncGenerator[RequestExecutor, None]:
    executor = RequestExecutor(
        config, token_source=token_store, notifier=notifier, indicator=indicator
    )
    yield executor
    await executor.aclose()
