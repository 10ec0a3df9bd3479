from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

pytest.importorskip("fastapi")
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.routes import get_now
from app.shared import timezones
from main import create_app

INDEX_HTML = b"<!doctype html><html><body><div id='root'></div></body></html>"
APP_JS = b"console.log('clock');\n"

# Mid-January: Toronto on EST (UTC-5), Tehran on +03:30.
WINTER_NOON_UTC = datetime(2024, 1, 15, 14, 0, tzinfo=timezone.utc)


@pytest.fixture()
def frontend_dir(tmp_path: Path) -> Path:
    build = tmp_path / "build"
    (build / "static" / "js").mkdir(parents=True)
    (build / "index.html").write_bytes(INDEX_HTML)
    (build / "static" / "js" / "app.js").write_bytes(APP_JS)
    return build


@pytest.fixture()
def settings(frontend_dir: Path) -> Settings:
    return Settings(_env_file=None, frontend_dir=frontend_dir, log_level="WARNING")


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture()
def set_now(app: FastAPI) -> Callable[[datetime], None]:
    def _set(moment: datetime) -> None:
        app.dependency_overrides[get_now] = lambda: moment

    _set(WINTER_NOON_UTC)
    yield _set
    app.dependency_overrides.clear()


@pytest.fixture()
def client(app: FastAPI, set_now) -> TestClient:
    return TestClient(app)


@pytest.fixture()
def broken_tzdb(monkeypatch: pytest.MonkeyPatch):
    def _missing(identifier: str):
        raise timezones.ZoneInfoNotFoundError(f"No time zone found with key {identifier}")

    timezones._load.cache_clear()
    monkeypatch.setattr(timezones, "ZoneInfo", _missing)
    yield
    monkeypatch.undo()
    timezones._load.cache_clear()
