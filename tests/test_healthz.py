from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from htmx_demo.app import create_app


def test_healthz_ok(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HTMX_DEMO_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_static_stylesheet_is_served(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HTMX_DEMO_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        response = client.get("/static/demo.css")
        assert response.status_code == 200
        assert ".nav-tabs>a.selected" in response.text
