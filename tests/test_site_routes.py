from __future__ import annotations

from pathlib import Path


def test_health_reports_row_count(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    body = response.get_json()
    assert body["ok"] is True
    assert body["rows"] == 6


def test_health_does_not_require_api_key(client, data_dir) -> None:
    (data_dir / "dailyMetrics.json").write_text("nope", encoding="utf-8")
    response = client.get("/health")
    assert response.status_code == 503
    assert response.get_json()["ok"] is False


def test_frontend_missing_build_is_404(client) -> None:
    assert client.get("/").status_code == 404


def test_frontend_serves_index_and_assets(app, client) -> None:
    dist = Path(app.config["FRONTEND_DIST"])
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<html>dashboard</html>", encoding="utf-8")
    (dist / "assets" / "app.js").write_text("console.log(1)", encoding="utf-8")

    assert b"dashboard" in client.get("/").data
    assert client.get("/assets/app.js").data == b"console.log(1)"
    # client-side routes fall back to index.html
    assert b"dashboard" in client.get("/studies/overview").data


def test_unknown_api_path_is_not_served_index(app, client, auth_headers) -> None:
    dist = Path(app.config["FRONTEND_DIST"])
    dist.mkdir(parents=True)
    (dist / "index.html").write_text("<html>dashboard</html>", encoding="utf-8")
    assert client.get("/api/unknown", headers=auth_headers).status_code == 404
