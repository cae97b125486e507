"""
Static OpenAPI document and Swagger UI routes.

The document is maintained by hand and is not generated from the route
definitions in catalogue.main.
"""

from fastapi import APIRouter
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

DOCS_PREFIX = "/api-docs"
SWAGGER_JSON_PATH = f"{DOCS_PREFIX}/swagger.json"


def _book_id_parameter(action: str) -> dict:
    return {
        "name": "bookId",
        "in": "path",
        "description": f"ID of the book to {action}",
        "required": True,
        "schema": {"type": "integer"},
    }


def _json_content(schema: dict) -> dict:
    return {"application/json": {"schema": schema}}


SWAGGER_DOC = {
    "openapi": "3.0.0",
    "info": {
        "version": "1.0.0",
        "title": "Book Catalogue API",
        "description": "An example API for managing a list of books.",
    },
    "servers": [{"url": "/"}],
    "paths": {
        "/api/books": {
            "get": {
                "summary": "Get a list of all books",
                "tags": ["Book"],
                "responses": {
                    "200": {
                        "description": "A list of books",
                        "content": _json_content({
                            "type": "array",
                            "items": {"$ref": "#/components/schemas/Book"},
                        }),
                    },
                },
            },
            "post": {
                "summary": "Add a new book",
                "requestBody": {
                    "required": True,
                    "content": _json_content({"$ref": "#/components/schemas/NewBook"}),
                },
                "responses": {
                    "201": {
                        "description": "Created",
                        "content": _json_content({"$ref": "#/components/schemas/Book"}),
                    },
                },
            },
        },
        "/api/books/{bookId}": {
            "get": {
                "summary": "Fetch details about a specific book",
                "parameters": [_book_id_parameter("fetch")],
                "responses": {
                    "200": {
                        "description": "Details of the specified book",
                        "content": _json_content({"$ref": "#/components/schemas/Book"}),
                    },
                    "404": {"description": "Book not found"},
                },
            },
            "delete": {
                "summary": "Delete a specific book",
                "parameters": [_book_id_parameter("delete")],
                "responses": {
                    "204": {"description": "Deleted successfully"},
                    "404": {"description": "Book not found"},
                },
            },
        },
    },
    "components": {
        "schemas": {
            "Book": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "title": {"type": "string"},
                    "author": {"type": "string"},
                },
            },
            "NewBook": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "author": {"type": "string"},
                },
                "required": ["title", "author"],
            },
        },
    },
}

router = APIRouter(include_in_schema=False)


@router.get(SWAGGER_JSON_PATH)
async def swagger_json():
    """Serve the static OpenAPI document."""
    return JSONResponse(content=SWAGGER_DOC)


@router.get(DOCS_PREFIX, response_class=HTMLResponse)
@router.get(DOCS_PREFIX + "/{path:path}", response_class=HTMLResponse)
async def swagger_ui(path: str = ""):
    """Render Swagger UI for the static document."""
    return get_swagger_ui_html(
        openapi_url=SWAGGER_JSON_PATH,
        title=f"{SWAGGER_DOC['info']['title']} - Swagger UI",
    )
