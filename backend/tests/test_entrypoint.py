import runpy

from blog_api import main


def test_module_entrypoint_starts_the_server(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "run", lambda: calls.append("run"))
    runpy.run_module("blog_api", run_name="__main__")
    assert calls == ["run"]


def test_run_uses_configured_host_and_port(monkeypatch):
    captured = {}
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: captured.update(kwargs, app=app))
    main.run()
    assert captured["app"] is main.app
    assert captured["host"] == main.settings.host
    assert captured["port"] == main.settings.port
