"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration

ERROR_KEYS = ["timestamp", "status", "message", "errors"]


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.delete("/api/v1/customers/42")
        assert response.status_code == 404
        data = response.json()
        assert list(data) == ERROR_KEYS
        assert data["status"] == "404 NOT_FOUND"
        assert data["message"] == data["errors"]

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert list(data) == ERROR_KEYS
        assert data["status"] == "400 BAD_REQUEST"

    def test_unsupported_method_has_standard_format(self, api_client):
        response = api_client.patch("/api/v1/customers/1", {}, format="json")
        assert response.status_code == 405
        data = response.json()
        assert data["status"] == "405 METHOD_NOT_ALLOWED"

    def test_unsupported_media_type_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", data="name=x", content_type="text/plain"
        )
        assert response.status_code == 415
        assert response.json()["status"] == "415 UNSUPPORTED_MEDIA_TYPE"

    def test_invalid_payload_lists_field_errors(self, api_client):
        response = api_client.post(
            "/api/v1/customers/", {"age": "old"}, format="json"
        )
        assert response.status_code == 400
        data = response.json()
        assert isinstance(data["errors"], list)
        assert data["errors"][0]["loc"] == ["age"]
