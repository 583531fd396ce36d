from fastapi import FastAPI

from time_service import server


def test_main_runs_uvicorn_with_settings(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(server.uvicorn, "run", fake_run)
    monkeypatch.setenv("TIME_SERVICE_PORT", "9191")
    monkeypatch.setenv("TIME_SERVICE_LOG_LEVEL", "warning")

    server.main()

    assert isinstance(calls["app"], FastAPI)
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 9191
    assert calls["log_level"] == "warning"
