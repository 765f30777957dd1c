"""Todo CRUD routes."""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from todo_api.dependencies import get_todo_store
from todo_api.schemas.ids import ROW_ID_MAX
from todo_api.schemas.todo import CreateTodo, TodoEntity, UpdateTodo
from todo_api.stores.errors import NotFoundError, StoreError
from todo_api.stores.interfaces import TodoStore

router = APIRouter()


@router.post("/todos", response_model=TodoEntity, status_code=201)
def create_todo(
    payload: CreateTodo,
    store: TodoStore = Depends(get_todo_store),
) -> TodoEntity:
    """Create a todo attached to the given label ids."""

    try:
        return store.create(payload)
    except StoreError as exc:
        _raise_http_error(exc)


@router.get("/todos", response_model=list[TodoEntity])
def all_todos(store: TodoStore = Depends(get_todo_store)) -> list[TodoEntity]:
    """List every todo ordered by id."""

    try:
        return store.all()
    except StoreError as exc:
        _raise_http_error(exc)


@router.get("/todos/{todo_id}", response_model=TodoEntity)
def find_todo(
    todo_id: int = Path(..., ge=1, le=ROW_ID_MAX),
    store: TodoStore = Depends(get_todo_store),
) -> TodoEntity:
    try:
        return store.find(todo_id)
    except StoreError as exc:
        _raise_http_error(exc)


@router.patch("/todos/{todo_id}", response_model=TodoEntity, status_code=201)
def update_todo(
    payload: UpdateTodo,
    todo_id: int = Path(..., ge=1, le=ROW_ID_MAX),
    store: TodoStore = Depends(get_todo_store),
) -> TodoEntity:
    """Partially update a todo; a ``labels`` list replaces all associations."""

    try:
        return store.update(todo_id, payload)
    except StoreError as exc:
        _raise_http_error(exc)


@router.delete("/todos/{todo_id}", status_code=204)
def delete_todo(
    todo_id: int = Path(..., ge=1, le=ROW_ID_MAX),
    store: TodoStore = Depends(get_todo_store),
) -> Response:
    try:
        store.delete(todo_id)
    except StoreError as exc:
        _raise_http_error(exc)
    return Response(status_code=204)


def _raise_http_error(exc: StoreError) -> NoReturn:
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=404, detail="Todo not found") from exc
    raise HTTPException(status_code=500, detail=str(exc)) from exc
