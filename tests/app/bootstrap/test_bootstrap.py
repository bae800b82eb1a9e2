"""Testes do startup: settings obrigatórias e saída do processo."""

from __future__ import annotations

import logging

import pytest

import app.app as app_module
from app import bootstrap
from config.settings import REQUIRED_ENV_VARS


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _env(**overrides: str) -> dict[str, str]:
    env = {
        "WEBHOOK_ENDPOINT": "/webhook",
        "APP_SECRET": "secret",
        "TOKEN": "token",
        "DATA_DIRECTORY": "/tmp",
        "PORT": "8080",
    }
    env.update(overrides)
    return env


def test_initialize_app_returns_settings() -> None:
    settings = bootstrap.initialize_app(_env(LOG_LEVEL="debug"))

    assert settings.port == 8080
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.parametrize("name", REQUIRED_ENV_VARS)
def test_initialize_app_exits_when_value_missing(name: str) -> None:
    env = _env()
    del env[name]

    with pytest.raises(SystemExit) as exc_info:
        bootstrap.initialize_app(env)

    assert exc_info.value.code == bootstrap.CONFIG_ERROR_EXIT_CODE
    assert exc_info.value.code != 0


def test_missing_config_is_reported_on_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        bootstrap.initialize_app(_env(TOKEN=""))

    captured = capsys.readouterr()
    assert "Missing or invalid required environment variables." in captured.err
    assert "TOKEN" in captured.err


def test_main_exits_before_binding(monkeypatch: pytest.MonkeyPatch) -> None:
    import uvicorn

    calls: list[object] = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append(args))
    monkeypatch.setattr(bootstrap, "load_dotenv", lambda: False)
    for key, value in _env().items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("PORT")

    with pytest.raises(SystemExit) as exc_info:
        app_module.main()

    assert exc_info.value.code == 1
    assert calls == []


def test_main_runs_uvicorn_with_configured_port(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    import uvicorn

    captured: dict[str, object] = {}

    def _fake_run(app: object, **kwargs: object) -> None:
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", _fake_run)
    monkeypatch.setattr(bootstrap, "load_dotenv", lambda: False)
    for key, value in _env(PORT="9123", DATA_DIRECTORY=str(tmp_path)).items():
        monkeypatch.setenv(key, value)

    app_module.main()

    assert captured["port"] == 9123
    assert captured["host"] == "0.0.0.0"
    assert captured["app"].state.settings.port == 9123


def test_invalid_log_level_exits_with_diagnostic(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        bootstrap.initialize_app(_env(LOG_LEVEL="verbose"))

    assert exc_info.value.code == bootstrap.CONFIG_ERROR_EXIT_CODE
    captured = capsys.readouterr()
    assert "Missing or invalid required environment variables." in captured.err
    assert "LOG_LEVEL" in captured.err


def test_reserved_endpoint_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        bootstrap.initialize_app(_env(WEBHOOK_ENDPOINT="/health"))

    assert exc_info.value.code == bootstrap.CONFIG_ERROR_EXIT_CODE
    assert "WEBHOOK_ENDPOINT" in capsys.readouterr().err
