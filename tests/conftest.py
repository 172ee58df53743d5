# appresync Test Fixtures
# Pytest fixtures for appresync tests

import tempfile
from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Optional
from uuid import UUID

import anyio
import pytest
import yaml

from appresync.sync.models import Environment, ResyncRequest, ResyncResponse

ENV_ID = UUID("6f1c1d52-7c8e-4a43-9a55-1f5b7a3c0e21")
ORIGINAL_URL = "https://a.com/api/inngest"


class FakeOperation:
    """Resync operation returning a canned response or raising."""

    def __init__(
        self,
        response: Optional[ResyncResponse] = None,
        *,
        exc: Optional[Exception] = None,
        gate: Optional[anyio.Event] = None,
    ):
        self.response = response
        self.exc = exc
        self.gate = gate
        self.calls: list[tuple[ResyncRequest, tuple[str, ...]]] = []

    async def __call__(self, request: ResyncRequest, *, invalidate_tags: Sequence[str] = ()):
        self.calls.append((request, tuple(invalidate_tags)))
        if self.gate is not None:
            await self.gate.wait()
        if self.exc is not None:
            raise self.exc
        return self.response


class RecordingNotifier:
    """Notifier remembering every message."""

    def __init__(self):
        self.messages: list[str] = []

    def success(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def environment() -> Environment:
    return Environment(id=ENV_ID, slug="production")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("APPRESYNC_CONFIG", raising=False)
    return home


@pytest.fixture
def sample_config(temp_home: Path) -> dict:
    """Create sample configuration dict."""
    return {
        "api": {
            "endpoint": "https://api.example.com/gql",
            "token": "secret-token",
            "timeout": 5.0,
        },
        "environment": {
            "id": str(ENV_ID),
            "slug": "production",
        },
        "output": {
            "verbose": False,
            "colored": False,
            "log_file": str(temp_home / "resync.md"),
        },
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "appresync"
    config_dir.mkdir(parents=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path
