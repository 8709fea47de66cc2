"""Tests for the data server."""
import pytest

from suomiarena.server import create_app

CSV = '"Kind","Mode","TopicKey","Payload"\n"best-time","plural","old-i","{""timeMs"": 5000}"\n'


@pytest.fixture
def csv_path(tmp_path):
    return tmp_path / "data" / "progress.csv"


@pytest.fixture
def client(csv_path):
    """Create a test client writing to a temporary CSV file."""
    app = create_app(csv_path)
    app.config["TESTING"] = True
    return app.test_client()


def test_get_without_data(client):
    """Test that a missing file is reported as 404."""
    response = client.get("/api/data")
    assert response.status_code == 404
    assert response.get_json()["message"] == "No data file found"


def test_post_empty_body(client, csv_path):
    """Test that empty uploads are rejected."""
    response = client.post("/api/data", data="", content_type="text/csv")
    assert response.status_code == 400
    response = client.post("/api/data", data="  \n", content_type="text/csv")
    assert response.status_code == 400
    assert not csv_path.exists()


def test_post_then_get(client, csv_path):
    """Test that uploaded data is stored verbatim and served back."""
    response = client.post("/api/data", data=CSV, content_type="text/csv")
    assert response.status_code == 200
    assert response.get_json()["success"] is True
    assert csv_path.read_text(encoding="utf-8") == CSV

    response = client.get("/api/data")
    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert response.get_data(as_text=True) == CSV


def test_post_replaces_previous_data(client):
    """Test that the last upload wins."""
    client.post("/api/data", data=CSV, content_type="text/csv")
    client.post("/api/data", data="Kind,Mode\n", content_type="text/csv")
    assert client.get("/api/data").get_data(as_text=True) == "Kind,Mode\n"


def test_health(client, csv_path):
    """Test the health endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "csvPath": str(csv_path)}


def test_cors_headers(client):
    """Test that any origin may call the API."""
    response = client.get("/api/health")
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in response.headers["Access-Control-Allow-Methods"]
