"""Todo request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from todo_api.schemas.ids import RowId
from todo_api.schemas.label import LabelRead

TODO_TEXT_MAX_LENGTH = 288


class CreateTodo(BaseModel):
    """Todo creation payload; ``labels`` holds label ids."""

    text: str = Field(min_length=1, max_length=TODO_TEXT_MAX_LENGTH)
    labels: list[RowId] = Field(default_factory=list)


class UpdateTodo(BaseModel):
    """Partial todo update; ``None`` leaves the stored value untouched.

    An empty ``labels`` list detaches every label, while omitting it keeps the
    current associations.
    """

    text: str | None = Field(default=None, min_length=1, max_length=TODO_TEXT_MAX_LENGTH)
    completed: bool | None = None
    labels: list[RowId] | None = None


class TodoEntity(BaseModel):
    """Hydrated todo with its attached labels."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    completed: bool
    labels: list[LabelRead] = Field(default_factory=list)
