"""
FastAPI main application for the Book Catalogue API.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalogue.config import CatalogueConfig, config
from catalogue.docs import router as docs_router
from catalogue.models import ErrorResponse, MessageResponse, NewBook
from catalogue.store import BookStore, loads_json, parse_book_id

# Setup logging
logger = structlog.get_logger(__name__)

WELCOME_MESSAGE = "Welcome to our Book Catalogue!"


def get_store(request: Request) -> BookStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def create_app(store: Optional[BookStore] = None, settings: Optional[CatalogueConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Store to serve; when omitted one is built from settings and loaded at startup
        settings: Service settings, defaults to the global config
    """
    settings = settings or config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Book Catalogue API")

        if app.state.store is None:
            app.state.store = BookStore.from_config(settings)
            app.state.store.load()

        logger.info("Server listening", host=settings.host, port=settings.port)

        yield

        logger.info("Shutting down Book Catalogue API")

    app = FastAPI(
        title=settings.api_title,
        description="An example API for managing a list of books.",
        version=settings.api_version,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan
    )
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        """Attach the request method and path to every log event."""
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.detail).model_dump(exclude_none=True),
            headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error("Unhandled exception", error=str(exc), path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="Internal server error",
                detail=str(exc) if settings.debug else None
            ).model_dump(exclude_none=True)
        )

    app.include_router(docs_router)
    app.include_router(books_router)
    return app


books_router = APIRouter(prefix="/api", tags=["Book"])


@books_router.get("", response_model=MessageResponse)
@books_router.get("/", response_model=MessageResponse, include_in_schema=False)
async def welcome():
    """Greet API clients."""
    return MessageResponse(message=WELCOME_MESSAGE)


@books_router.get("/books")
async def list_books(store: BookStore = Depends(get_store)):
    """Return every book in store order."""
    return JSONResponse(content=store.list_all())


@books_router.get("/books/{book_id}")
async def get_book(book_id: str, store: BookStore = Depends(get_store)):
    """
    Get a single book by ID.

    - **book_id**: Book identifier; non-numeric values never match
    """
    book = store.find_by_id(parse_book_id(book_id))
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found."
        )
    return JSONResponse(content=book)


@books_router.post("/books", status_code=status.HTTP_201_CREATED)
async def create_book(request: Request, store: BookStore = Depends(get_store)):
    """
    Add a book.

    The body must be a JSON object with a non-empty ``title`` and ``author``;
    any other fields are stored as given.
    """
    try:
        payload = loads_json(await request.body())
        NewBook.model_validate(payload)
    except (ValueError, ValidationError) as e:
        logger.debug("Rejected new book", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing title or author"
        )

    book = store.append(dict(payload))
    store.persist()
    logger.info("Book created", book_id=book["id"])
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=book)


@books_router.delete("/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(book_id: str, store: BookStore = Depends(get_store)):
    """Delete a single book by ID."""
    parsed_id = parse_book_id(book_id)
    if not store.remove_by_id(parsed_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found"
        )

    store.persist()
    logger.info("Book deleted", book_id=parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


app = create_app()
