"""Tests for Prometheus metrics exposure."""

from __future__ import annotations

from fastapi.testclient import TestClient

from book_catalog.main import app
from book_catalog.monitoring.middleware import record_request, render_metrics


client = TestClient(app)


def test_metrics_endpoint_exposes_prometheus_data() -> None:
    client.get("/health")

    response = client.get("/metrics")

    assert response.status_code == 200
    content = response.text
    assert "catalog_requests_total" in content
    assert "catalog_request_duration_seconds_sum" in content
    assert response.headers["content-type"].startswith("text/plain")


def test_metrics_label_book_routes_by_template() -> None:
    client.get("/api/books/12345")
    content = client.get("/metrics").text

    assert 'method="GET",path="/api/books/{book_id}",status="404"' in content
    assert "/api/books/12345" not in content


def test_server_errors_are_counted() -> None:
    record_request("POST", "/api/books", 500, 0.01)

    assert 'catalog_request_errors_total{method="POST",path="/api/books",status="500"}' in render_metrics()


def test_static_assets_share_one_label_and_scrapes_are_not_counted() -> None:
    client.get("/static/app.js")
    client.get("/static/styles.css")
    content = client.get("/metrics").text

    assert 'method="GET",path="/static",status="200"' in content
    assert "/static/app.js" not in content
    assert 'path="/metrics"' not in content
