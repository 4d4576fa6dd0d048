"""Task ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_tracker.domain.enums import TaskStatus
from task_tracker.infrastructure.persistence.database import Base
from task_tracker.infrastructure.persistence.models.mixins import (
    IdentityMixin,
    TimestampMixin,
)


class Task(IdentityMixin, TimestampMixin, Base):
    """A unit of work with a status. Table: task."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Stored as the enum name in a VARCHAR; the CHECK constraint keeps other values out.
    status: Mapped[TaskStatus] = mapped_column(
        Enum(
            TaskStatus,
            name="task_status",
            native_enum=False,
            create_constraint=True,
            length=32,
        ),
        nullable=False,
    )
    due_date_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = {"sqlite_autoincrement": True}
