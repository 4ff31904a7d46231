"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from description_tool.config import Settings
from description_tool.server import CORS_HEADERS, create_app


class TestHealthCheck:
    """Tests for health endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["tool"] == "product-description-generator"
        assert data["version"] == "1.0.0"
        assert data["endpoints"]["discovery"] == "/discovery"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "product-description-generator"}


class TestDiscovery:
    """Tests for the discovery endpoint."""

    def test_discovery(self, client):
        response = client.get("/discovery")

        assert response.status_code == 200
        functions = response.json()["functions"]
        assert len(functions) == 1
        assert functions[0]["name"] == "product-description-generator"
        assert functions[0]["http_method"] == "POST"

    def test_discovery_repeatable(self, client):
        assert client.get("/discovery").content == client.get("/discovery").content


class TestExecute:
    """Tests for POST / execution."""

    def test_simple_description(self, client):
        response = client.post("/", json={
            "productName": "Test Product",
            "partNumber": "TP-001",
            "attributes": ["Feature 1", "Feature 2"],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert "Test Product" in data["content"]
        assert "TP-001" in data["content"]
        assert data["metadata"]["attributeCount"] == 2

    def test_dewalt_description(self, client, dewalt_attributes):
        response = client.post("/", json={"parameters": {
            "productName": "DEWALT 20V Acrylic Dispenser",
            "partNumber": "211DCE595D1",
            "attributes": dewalt_attributes,
        }})

        content = response.json()["content"]
        assert "delivers powerful cordless performance." in content
        assert "capacity: 28 oz." in content
        assert "Built with DEWALT quality and reliability." in content
        assert len(content) <= 500

    @pytest.mark.parametrize("wrapper", ["parameters", "arguments", "input", None])
    def test_body_shapes_equivalent(self, client, wrapper):
        params = {"productName": "X", "partNumber": "Y", "attributes": []}
        flat = client.post("/", json=params).json()
        body = {wrapper: params} if wrapper else params

        assert client.post("/", json=body).json() == flat

    def test_missing_part_number(self, client):
        response = client.post("/", json={"productName": "X", "attributes": []})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Missing required parameters"
        assert data["details"] == "partNumber is required"

    def test_invalid_json(self, client):
        response = client.post("/", content="{not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Invalid request format"
        assert "not valid JSON" in data["details"]

    def test_deeply_nested_json(self, client):
        """JSON nested past the recursion limit is a malformed request, not a crash."""
        body = "[" * 100000 + "]" * 100000

        response = client.post("/", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/json")
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Invalid request format"
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_markdown_strategy(self, markdown_client):
        response = markdown_client.post("/", json={"productName": "X", "partNumber": "Y", "attributes": []})

        assert response.status_code == 200
        content = response.json()["content"]
        assert content.startswith("# X")
        assert "- No additional attributes specified" in content

    def test_named_tool_not_found(self, client):
        response = client.post("/tools/unknown", json={"productName": "X", "partNumber": "Y"})

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestCors:
    """Tests for cross-origin headers."""

    @pytest.mark.parametrize("path", ["/", "/discovery", "/health"])
    def test_headers_on_get(self, client, path):
        response = client.get(path)

        for header, value in CORS_HEADERS.items():
            assert response.headers[header] == value

    def test_headers_on_error(self, client):
        response = client.post("/", json={})

        assert response.status_code == 400
        for header, value in CORS_HEADERS.items():
            assert response.headers[header] == value

    def test_preflight(self, client):
        response = client.options("/")

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert "POST" in response.headers["Access-Control-Allow-Methods"]

    def test_unexpected_failure_is_json_with_headers(self, settings, monkeypatch):
        """An unexpected error inside the route still yields a CORS-decorated envelope."""
        async def broken_read_body(request):
            raise RuntimeError("socket vanished")

        monkeypatch.setattr("description_tool.server.read_body", broken_read_body)
        client = TestClient(create_app(settings), raise_server_exceptions=False)

        response = client.post("/", json={"productName": "X", "partNumber": "Y"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"] == "Failed to generate description"
        assert "details" not in data
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_unexpected_failure_details_in_debug(self, monkeypatch):
        async def broken_read_body(request):
            raise RuntimeError("socket vanished")

        monkeypatch.setattr("description_tool.server.read_body", broken_read_body)
        client = TestClient(create_app(Settings(debug=True)), raise_server_exceptions=False)

        response = client.post("/", json={"productName": "X", "partNumber": "Y"})

        assert response.status_code == 400
        assert response.json()["details"] == "socket vanished"

    def test_not_found(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Not Found"
        assert data["tool"] == "product-description-generator"
        assert response.headers["Access-Control-Allow-Origin"] == "*"


class TestSettings:
    """Tests for configuration."""

    def test_strategy_from_environment(self, monkeypatch):
        monkeypatch.setenv("DESCRIPTION_TOOL_STRATEGY", "summary")
        client = TestClient(create_app(Settings()))

        response = client.post("/", json={"productName": "X", "partNumber": "Y"})

        assert response.json()["content"] == "The X (Part# Y) is available now."

    def test_debug_default_off(self):
        assert Settings().debug is False
