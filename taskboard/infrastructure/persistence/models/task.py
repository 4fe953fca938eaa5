"""Task ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.domain.enums import TaskStatus
from taskboard.infrastructure.persistence.database import Base
from taskboard.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin
from taskboard.infrastructure.persistence.models.user import User


class Task(CuidMixin, TimestampMixin, Base):
    """Task created by one user and assigned to one user. Table: task.

    creator_id is written once at insert; repositories never update it.
    """

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    priority: Mapped[str] = mapped_column(String(16), nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=TaskStatus.TODO.value,
        server_default=TaskStatus.TODO.value,
    )
    creator_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    assigned_to_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )

    creator: Mapped[User | None] = relationship(foreign_keys=[creator_id], lazy="raise")
    assigned_to: Mapped[User | None] = relationship(
        foreign_keys=[assigned_to_id], lazy="raise"
    )

    __table_args__ = (
        Index("ix_task_assigned_due", "assigned_to_id", "due_date"),
        Index("ix_task_due_date", "due_date"),
        Index("ix_task_status", "status"),
    )
