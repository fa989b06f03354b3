"""HTTP tests for the character endpoints."""

import pytest

from character_api.api.middleware.cors import CORS_HEADERS
from character_api.models import FirstNames, Names
from character_api.store import DataStore

ENDPOINTS = ["/name", "/personality", "/character"]


def assert_cors(response):
    for header, value in CORS_HEADERS.items():
        assert response.headers[header] == value


class TestNameEndpoint:
    def test_fixture_outcomes(self, client):
        allowed = [
            {"firstName": "Sam", "lastName": "Doe", "sex": "Male"},
            {"firstName": "Alex", "lastName": "Doe", "sex": "Female"},
        ]
        for _ in range(50):
            response = client.get("/name")
            assert response.status_code == 200
            assert response.headers["content-type"].startswith("application/json")
            assert response.json() in allowed

    def test_all_names_empty(self, make_client):
        client = make_client(DataStore())
        response = client.get("/name")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert "Names data not loaded or empty" in response.text
        assert_cors(response)

    def test_missing_last_names(self, make_client, fixture_personality):
        names = Names(first_names=FirstNames(male=("Sam",), female=("Alex",)))
        client = make_client(DataStore(names=names, personality=fixture_personality))
        for _ in range(20):
            response = client.get("/name")
            assert response.status_code == 500
            assert "No last names available" in response.text

    def test_post_is_accepted(self, client):
        response = client.post("/name")
        assert response.status_code == 200
        assert set(response.json()) == {"firstName", "lastName", "sex"}


class TestPersonalityEndpoint:
    def test_shape(self, client, fixture_personality):
        response = client.get("/personality")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"personalityType", "alignment"}
        assert set(data["personalityType"]) == {"name", "link"}
        assert data["alignment"] in fixture_personality.alignments

    def test_empty_catalog(self, make_client, fixture_names):
        client = make_client(DataStore(names=fixture_names))
        response = client.get("/personality")

        assert response.status_code == 500
        assert "Personality data not loaded or empty" in response.text


class TestCharacterEndpoint:
    def test_exactly_five_fields(self, client):
        for _ in range(20):
            data = client.get("/character").json()
            assert set(data) == {
                "sex",
                "firstName",
                "lastName",
                "personalityType",
                "alignment",
            }
            assert set(data["personalityType"]) == {"name", "link"}

    def test_no_partial_body_on_failure(self, make_client, fixture_names):
        client = make_client(DataStore(names=fixture_names))
        response = client.get("/character")

        assert response.status_code == 500
        assert not response.headers["content-type"].startswith("application/json")
        assert "firstName" not in response.text


class TestCors:
    @pytest.mark.parametrize("path", ENDPOINTS + ["/"])
    def test_headers_on_get(self, client, path):
        assert_cors(client.get(path))

    @pytest.mark.parametrize("path", ENDPOINTS)
    def test_preflight_short_circuits(self, make_client, path):
        client = make_client(DataStore())
        response = client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)

    def test_preflight_on_unknown_path(self, client):
        response = client.options("/anything")
        assert response.status_code == 200
        assert response.content == b""


class TestEcho:
    @pytest.mark.parametrize("path", ["/", "/health", "/some/nested/path"])
    def test_echoes_path(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == f"Hello, you've requested: {path}\n"

    def test_head_root(self, client):
        response = client.head("/")
        assert response.status_code == 200

    @pytest.mark.parametrize("method", ["DELETE", "PUT", "PATCH"])
    def test_any_method_echoes(self, client, method):
        response = client.request(method, "/anything")

        assert response.status_code == 200
        assert response.text == "Hello, you've requested: /anything\n"
        assert_cors(response)


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE"])
def test_endpoints_accept_any_method(client, method):
    response = client.request(method, "/name")

    assert response.status_code == 200
    assert set(response.json()) == {"firstName", "lastName", "sex"}
