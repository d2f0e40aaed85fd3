import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from bulbosc import BulbOscConfig, BulbState, HomeAssistantConfig
from bulbosc.providers import BulbStateProvider

TEST_DATA_PATH = Path(__file__).parent / "data"
TEST_CONFIG_PATH = TEST_DATA_PATH / "config"

SETTINGS_YAML = TEST_CONFIG_PATH / "settings.yaml"
SETTINGS_TOML = TEST_CONFIG_PATH / "bulbosc.toml"
BROKEN_YAML = TEST_CONFIG_PATH / "broken.yaml"
ENV_FILE = TEST_CONFIG_PATH / ".env"

assert SETTINGS_YAML.exists(), f"Settings file {SETTINGS_YAML} does not exist"
assert SETTINGS_TOML.exists(), f"Settings file {SETTINGS_TOML} does not exist"
assert ENV_FILE.exists(), f"Environment file {ENV_FILE} does not exist"


class RecordingSink:
    """OSC sink that records every message instead of sending it."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, Any]] = []

    def send(self, address: str, value: Any) -> bool:
        self.messages.append((address, value))
        return True


class ScriptedProvider(BulbStateProvider):
    """Provider returning a fixed sequence of states, then raising the configured error."""

    def __init__(self, states: list[BulbState], error: Exception | None = None) -> None:
        self.states = list(states)
        self.error = error
        self.fetch_count = 0
        self.closed = False

    @classmethod
    def from_config(cls, config):
        return cls([])

    def fetch_bulb_state(self) -> BulbState:
        self.fetch_count += 1
        if self.states:
            return self.states.pop(0)
        if self.error is not None:
            raise self.error
        raise AssertionError("ScriptedProvider ran out of states")

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Run every test from an empty directory with no bulbosc environment variables or logging setup."""
    monkeypatch.chdir(tmp_path)
    for name in ("BULBOSC__CONFIG_FILE", "BULBOSC_CONFIG_FILE", "BULBOSC__CONFIG_DIR", "BULBOSC_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BULBOSC__CONFIG_DIR", str(tmp_path / "config"))

    yield

    logger = logging.getLogger("bulbosc")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging.captureWarnings(False)


@pytest.fixture(scope="session")
def test_config_path() -> Path:
    """Provide the path to the test config directory."""
    return TEST_CONFIG_PATH


@pytest.fixture
def settings_yaml() -> Path:
    return SETTINGS_YAML


@pytest.fixture
def settings_toml() -> Path:
    return SETTINGS_TOML


@pytest.fixture
def broken_yaml() -> Path:
    return BROKEN_YAML


@pytest.fixture
def env_file_path() -> Path:
    """Provide the path to the test environment file."""
    return ENV_FILE


@pytest.fixture
def ha_config() -> HomeAssistantConfig:
    return HomeAssistantConfig(
        entity_id="light.bedroom",
        server_ip="test.local",
        server_port=8123,
        bearer_token="abcdef-test-token-123456",
    )


@pytest.fixture
def test_config(ha_config: HomeAssistantConfig) -> BulbOscConfig:
    """Provide a BulbOscConfig built only from explicit values."""
    return BulbOscConfig(max_updates_per_second=10, home_assistant=ha_config)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def caplog_info(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO)
    return caplog
