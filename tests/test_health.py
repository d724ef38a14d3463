from starlette.requests import Request
from app.constants import parse_origins
from app.core.rate_limit import get_real_ip


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200


def test_docs_available(client):
    """Test that API docs are available"""
    response = client.get("/docs")
    assert response.status_code == 200


def test_openapi_lists_instruction_routes(client):
    response = client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/instructions/recipe/{recipe_id}" in paths
    assert "/api/instructions/{instruction_id}/recipe/{recipe_id}/step" in paths


def _request(headers):
    return Request(
        {
            "type": "http",
            "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
            "client": ("10.0.0.9", 1234),
        }
    )


def test_rate_limit_key_prefers_forwarded_for():
    request = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
    assert get_real_ip(request) == "203.0.113.7"


def test_rate_limit_key_falls_back_to_client_address():
    assert get_real_ip(_request({})) == "10.0.0.9"


def test_cors_origins_skip_blank_entries():
    assert parse_origins("https://a.example, ,https://b.example, ") == [
        "https://a.example",
        "https://b.example",
    ]
    assert parse_origins("*") == ["*"]
