"""Todo-to-label association model."""

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.models.base import Base


class TodoLabel(Base):
    """Join-table row attaching one label to one todo."""

    __tablename__ = "todo_labels"

    todo_id: Mapped[int] = mapped_column(
        ForeignKey("todos.id", ondelete="CASCADE"),
        primary_key=True,
    )
    label_id: Mapped[int] = mapped_column(
        ForeignKey("labels.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
