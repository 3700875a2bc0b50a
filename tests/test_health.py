from fastapi.testclient import TestClient

from book_catalog.main import app


client = TestClient(app)


def test_health_endpoint_reports_service():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "service": app.title,
        "version": app.version,
    }
