# =============================================================================
# tests/test_scripts.py - Operator Script Tests
# =============================================================================
# Scripts live outside the installed packages, so they are loaded by path.
# =============================================================================

import importlib.util
from pathlib import Path

import pytest
import uvicorn

from app.config import settings

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestStartServer:
    """Tests for scripts/start_server.py."""

    @pytest.fixture
    def uvicorn_calls(self, monkeypatch):
        calls = []

        def fake_run(app, **kwargs):
            calls.append((app, kwargs))

        monkeypatch.setattr(uvicorn, "run", fake_run)
        return calls

    def test_binds_configured_host_and_port(self, uvicorn_calls):
        load_script("start_server").main()

        app, kwargs = uvicorn_calls[0]
        assert app == "app.main:app"
        assert kwargs["host"] == settings.API_HOST
        assert kwargs["port"] == settings.API_PORT

    def test_reloads_in_development_only(self, uvicorn_calls):
        load_script("start_server").main()

        _, kwargs = uvicorn_calls[0]
        assert kwargs["reload"] is settings.is_development
