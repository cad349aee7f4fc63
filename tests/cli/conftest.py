import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_env_vars() -> dict[str, str]:
    """Fixture to provide mock environment variables."""
    return {
        "FETCHKIT_BASE_URL": "https://api.example.test",
        "FETCHKIT_ACCESS_TOKEN": "mock_token",
        "FETCHKIT_TIMEOUT_MS": "2000",
    }
