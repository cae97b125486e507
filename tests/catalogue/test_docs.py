"""
Tests for the API documentation routes.
"""

import pytest
from fastapi.routing import APIRoute

from catalogue.docs import SWAGGER_DOC
from catalogue.main import create_app


def test_swagger_json_served_verbatim(client):
    response = client.get("/api-docs/swagger.json")
    assert response.status_code == 200
    assert response.json() == SWAGGER_DOC


def test_document_schemas():
    schemas = SWAGGER_DOC["components"]["schemas"]
    assert set(schemas) == {"Book", "NewBook"}
    assert schemas["NewBook"]["required"] == ["title", "author"]
    assert SWAGGER_DOC["openapi"] == "3.0.0"


@pytest.mark.parametrize("path", ["/api-docs", "/api-docs/", "/api-docs/index.html"])
def test_swagger_ui(client, path):
    response = client.get(path)
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "swagger-ui" in response.text
    assert "/api-docs/swagger.json" in response.text


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
def test_generated_docs_disabled(client, path):
    assert client.get(path).status_code == 404


def test_documented_operations_are_routed():
    """Every operation in the static document has a matching route."""
    app = create_app()
    routed = {
        (route.path, method.lower())
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }

    for path, operations in SWAGGER_DOC["paths"].items():
        route_path = path.replace("{bookId}", "{book_id}")
        for method in operations:
            assert (route_path, method) in routed, f"{method.upper()} {path} is not routed"
