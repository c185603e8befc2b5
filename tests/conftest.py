import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nexmo_client import initialize  # noqa: E402


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line("markers", "unit: mark test as a unit test")


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch, tmp_path):
    """Run every test with a known environment and no stray ``.env`` file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "NEXMO_API_KEY",
        "NEXMO_API_SECRET",
        "NEXMO_PROTOCOL",
        "NEXMO_DEBUG",
        "NEXMO_API_HOST",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    yield


@pytest.fixture
def captured():
    """Requests seen by the mock transport, in order."""
    return []


@pytest.fixture
def make_transport(captured):
    """Build an ``httpx.MockTransport`` that records every request.

    The default handler answers ``200 {"ok": true}``.
    """

    def _make(handler=None):
        def _handler(request: httpx.Request):
            captured.append(request)
            if handler is None:
                return httpx.Response(200, json={"ok": True})
            return handler(request)

        return httpx.MockTransport(_handler)

    return _make


@pytest.fixture
def make_client(make_transport):
    """Build an initialized client wired to a recording mock transport."""

    def _make(handler=None, protocol=None, debug=False):
        return initialize(
            "test-key",
            "test-secret",
            protocol,
            debug,
            transport=make_transport(handler),
        )

    return _make


@pytest.fixture
def callback_calls():
    return []


@pytest.fixture
def callback(callback_calls):
    """Continuation that records each ``(error, result)`` it receives."""

    def _callback(error, result):
        callback_calls.append((error, result))

    return _callback
