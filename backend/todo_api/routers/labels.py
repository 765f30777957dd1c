"""Label routes; every store failure is reported as a server error."""

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from todo_api.dependencies import get_label_store
from todo_api.schemas.ids import ROW_ID_MAX
from todo_api.schemas.label import CreateLabel, LabelRead
from todo_api.stores.errors import StoreError
from todo_api.stores.interfaces import LabelStore

router = APIRouter(prefix="/label")


@router.post("", response_model=LabelRead, status_code=201)
def create_label(
    payload: CreateLabel,
    store: LabelStore = Depends(get_label_store),
) -> LabelRead:
    """Create a label; a taken name is rejected rather than reused."""

    try:
        return store.create(payload)
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("", response_model=list[LabelRead])
def all_labels(store: LabelStore = Depends(get_label_store)) -> list[LabelRead]:
    """List every label ordered by id."""

    try:
        return store.all()
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.delete("/{label_id}", status_code=204)
def delete_label(
    label_id: int = Path(..., ge=1, le=ROW_ID_MAX),
    store: LabelStore = Depends(get_label_store),
) -> Response:
    """Delete a label and detach it from every todo."""

    try:
        store.delete(label_id)
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return Response(status_code=204)
