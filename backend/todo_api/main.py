"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from todo_api import __version__
from todo_api.config import Settings, get_settings
from todo_api.db.session import create_db_engine, create_session_factory
from todo_api.routers import labels, todos
from todo_api.stores.interfaces import LabelStore, TodoStore
from todo_api.stores.labels import DatabaseLabelStore
from todo_api.stores.memory import InMemoryLabelStore, InMemoryTodoStore
from todo_api.stores.todos import DatabaseTodoStore

logger = logging.getLogger(__name__)


def create_app(todo_store: TodoStore, label_store: LabelStore, allowed_origin: str) -> FastAPI:
    """Build the API around explicitly supplied stores."""

    app = FastAPI(title="Todo API", version=__version__)
    app.state.todo_store = todo_store
    app.state.label_store = label_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[allowed_origin],
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["content-type"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(todos.router, tags=["todos"])
    app.include_router(labels.router, tags=["labels"])
    app.add_api_route("/", root, methods=["GET"], response_class=PlainTextResponse)
    return app


def build_stores(settings: Settings) -> tuple[TodoStore, LabelStore]:
    """Construct the stores for the configured backend."""

    if settings.store_backend == "memory":
        label_store = InMemoryLabelStore()
        return InMemoryTodoStore(label_store), label_store

    session_factory = create_session_factory(create_db_engine(settings.database_url))
    return DatabaseTodoStore(session_factory), DatabaseLabelStore(session_factory)


def build_app(settings: Settings | None = None) -> FastAPI:
    """Application factory wired from environment settings."""

    settings = settings or get_settings()
    todo_store, label_store = build_stores(settings)
    logger.info("app.build store_backend=%s allowed_origin=%s", settings.store_backend, settings.allowed_origin)
    return create_app(todo_store, label_store, settings.allowed_origin)


def root() -> str:
    return "Hello, world!"


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or invalid requests as 400.

    Bodies that cannot be decoded into the payload shape (bad JSON, missing
    fields, wrong types) are parse errors; constraint failures on well-formed
    values are validation errors.
    """

    errors = exc.errors()
    if any(_is_decode_error(error) for error in errors):
        prefix = "Json parse error"
    else:
        prefix = "Validation error"
    messages = [f"{_error_location(error)}: {error.get('msg', '')}" for error in errors]
    return JSONResponse(status_code=400, content={"detail": f"{prefix}: [{', '.join(messages)}]"})


def _is_decode_error(error: dict) -> bool:
    location = error.get("loc", ())
    if not location or location[0] != "body":
        return False
    error_type = error.get("type", "")
    return error_type in ("json_invalid", "missing") or error_type.endswith(("_type", "_parsing"))


def _error_location(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    return ".".join(location) or "body"
