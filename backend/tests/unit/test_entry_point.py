"""Unit tests for the uvicorn entry point."""

import uvicorn

from blog import main as blog_main
from blog.config import Settings


def test_main_serves_the_app_factory(monkeypatch):
    calls: list[tuple[tuple, dict]] = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(blog_main, "get_settings", lambda: Settings(_env_file=None, host="127.0.0.1", port=8123))

    blog_main.main()

    (args, kwargs), = calls
    assert args == ("blog.main:create_app",)
    assert kwargs["factory"] is True
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8123
    assert kwargs["lifespan"] == "on"


def test_module_exposes_factory_not_instance():
    assert callable(blog_main.create_app)
    assert not hasattr(blog_main, "app")
