"""Todo ORM model."""

from sqlalchemy import Boolean, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.models.base import Base, IdMixin


class Todo(Base, IdMixin):
    """Flat persisted todo row."""

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    text: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)
