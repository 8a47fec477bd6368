"""
NoteKeeper Backend: Application Lifespan Tests
===============================================

Startup refuses to run without a signing secret; with one it starts and
shuts down cleanly.
"""

import pytest

from app.config import settings
from app.exceptions import ConfigurationError
from app.main import create_app, lifespan


@pytest.fixture
def quiet_startup(monkeypatch):
    # Root logging is owned by pytest during the run
    monkeypatch.setattr("app.main.setup_logging", lambda: None)
    return monkeypatch


@pytest.mark.asyncio
async def test_startup_fails_without_secret(quiet_startup):
    quiet_startup.setattr(settings, "access_token_secret", "")

    with pytest.raises(ConfigurationError) as excinfo:
        async with lifespan(create_app()):
            pass

    assert "ACCESS_TOKEN_SECRET" in excinfo.value.message


@pytest.mark.asyncio
async def test_startup_fails_with_placeholder_secret(quiet_startup):
    quiet_startup.setattr(settings, "access_token_secret", "change-me")

    with pytest.raises(ConfigurationError):
        async with lifespan(create_app()):
            pass


@pytest.mark.asyncio
async def test_startup_and_shutdown_with_secret(quiet_startup):
    disposed = []

    async def _dispose():
        disposed.append(True)

    quiet_startup.setattr("app.main.dispose_engine", _dispose)

    async with lifespan(create_app()):
        assert disposed == []

    assert disposed == [True]
