"""Entry point tests - the app is served by uvicorn with settings-driven host/port."""

from library import main
from library.config import get_settings


def test_run_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    main.run()
    settings = get_settings()
    assert calls == [
        (
            "library.main:app",
            {"host": settings.host, "port": settings.port, "log_level": settings.log_level.lower()},
        )
    ]
