"""Tests for the FastAPI tool app."""

import pytest
from fastapi.testclient import TestClient

from modules.base_convert.tool.app import app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


def test_index_page(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "Base Converter" in response.text
    assert 'action="/convert"' in response.text


class TestFormConvert:
    def test_success(self, client: TestClient) -> None:
        response = client.post(
            "/convert", data={"value": "0xffff", "base_from": "16", "base_to": "10"}
        )
        assert response.status_code == 200
        payload = response.json()
        assert payload["converted"] == "65535"
        assert payload["decimal"] == "65535"

    def test_invalid_digit(self, client: TestClient) -> None:
        response = client.post(
            "/convert", data={"value": "g", "base_from": "16", "base_to": "10"}
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid digit for base 16")

    def test_missing_value(self, client: TestClient) -> None:
        response = client.post("/convert", data={"base_from": "16", "base_to": "10"})
        assert response.status_code == 400
        assert response.json() == {"error": "Value is required."}


class TestQueryConvert:
    def test_success(self, client: TestClient) -> None:
        response = client.get(
            "/api/convert", params={"value": "-ff", "base_from": "16", "base_to": "10"}
        )
        assert response.status_code == 200
        assert response.json() == {"base_from": 16, "base_to": 10, "converted": "-255"}

    def test_domain_error_is_normalized(self, client: TestClient) -> None:
        response = client.get(
            "/api/convert", params={"value": "10", "base_from": "37", "base_to": "10"}
        )
        assert response.status_code == 400
        payload = response.json()
        assert payload["code"] == "invalid_base"
        assert "between 2 and 36" in payload["error"]

    def test_overflow(self, client: TestClient) -> None:
        response = client.get(
            "/api/convert",
            params={"value": "18446744073709551616", "base_from": "10", "base_to": "16"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "overflow"

    def test_missing_parameter(self, client: TestClient) -> None:
        response = client.get("/api/convert", params={"value": "ff"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid input."}
