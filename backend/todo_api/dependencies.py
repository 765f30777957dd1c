"""FastAPI dependencies resolving the stores attached to the application."""

from fastapi import Request

from todo_api.stores.interfaces import LabelStore, TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """Return the todo store the app was built with."""

    return request.app.state.todo_store


def get_label_store(request: Request) -> LabelStore:
    """Return the label store the app was built with."""

    return request.app.state.label_store
