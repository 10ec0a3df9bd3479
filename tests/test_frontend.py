from __future__ import annotations

from fastapi.testclient import TestClient

from app.config import Settings
from main import create_app
from tests.conftest import APP_JS, INDEX_HTML


def test_root_serves_entry_document(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.content == INDEX_HTML
    assert response.headers["content-type"].startswith("text/html")


def test_existing_file_is_served_as_is(client) -> None:
    response = client.get("/static/js/app.js")

    assert response.status_code == 200
    assert response.content == APP_JS
    assert "javascript" in response.headers["content-type"]


def test_unknown_path_falls_back_to_entry_document(client) -> None:
    response = client.get("/settings/profile")

    assert response.status_code == 200
    assert response.content == INDEX_HTML


def test_path_outside_build_dir_is_not_served(client, frontend_dir) -> None:
    (frontend_dir.parent / "secret.txt").write_text("hidden")

    response = client.get("/..%2Fsecret.txt")

    assert response.status_code == 200
    assert response.content == INDEX_HTML


def test_missing_entry_document_is_404(client, frontend_dir) -> None:
    (frontend_dir / "index.html").unlink()

    assert client.get("/").status_code == 404
    assert client.get("/some/route").status_code == 404
    assert client.get("/static/js/app.js").status_code == 200


def test_api_survives_missing_frontend(tmp_path) -> None:
    settings = Settings(
        _env_file=None, frontend_dir=tmp_path / "missing", log_level="WARNING"
    )
    client = TestClient(create_app(settings))

    assert client.get("/").status_code == 404
    assert client.get("/api/current-time").status_code == 200
