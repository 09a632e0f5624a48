"""Request ID, health and Prometheus export contract tests.

These validate that the endpoints are reachable and expose the expected
metric names. They do not validate absolute counter values across tests.
"""

from fastapi.testclient import TestClient

from sitemap_styles.api.main import app
from sitemap_styles.api.observability.metrics import normalize_path


def test_request_id_header_roundtrip():
    c = TestClient(app)
    r = c.get("/health/live")
    assert r.status_code == 200
    assert len(r.headers["X-Request-Id"]) > 10


def test_request_id_passthrough():
    c = TestClient(app)
    rid = "test-rid-123"
    r = c.get("/sitemap.xsl", headers={"X-Request-Id": rid})
    assert r.headers.get("X-Request-Id") == rid


def test_health_ready(client):
    r = client.get("/health/ready")
    assert r.status_code == 200
    assert r.json() == {"status": "ready"}


def test_health_not_ready_when_locale_file_missing(client, monkeypatch, tmp_path):
    monkeypatch.setenv("SITEMAPS_LOCALE_FILE", str(tmp_path / "missing.yaml"))
    r = client.get("/health/ready")
    assert r.status_code == 503
    assert r.json()["status"] == "not_ready"
    assert r.json()["problems"][0].startswith("missing_file:SITEMAPS_LOCALE_FILE=")


def test_prometheus_metrics_endpoint_exposes_render_counters(client):
    client.get("/sitemap.xsl")
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "sitemaps_http_requests_total" in r.text
    assert 'sitemaps_stylesheet_renders_total{variant="sitemap"}' in r.text


def test_metrics_snapshot_counts_renders(client):
    client.get("/sitemap-index.xsl")
    client.get("/sitemap-stylesheet", params={"type": "nope"})
    body = client.get("/metrics/snapshot").json()
    assert body["named"]["stylesheet_render_index"] == 1
    assert body["named"]["stylesheet_render_unknown"] == 1


def test_unknown_route_does_not_leak_traceback(client):
    r = client.get("/does/not/exist")
    assert r.status_code == 404
    assert "Traceback" not in r.text


def test_normalize_path_collapses_numbered_files():
    assert normalize_path("/sitemap-posts-3.xml") == "/sitemap-posts-:n.xml"
    assert normalize_path("/sitemap.xsl") == "/sitemap.xsl"
