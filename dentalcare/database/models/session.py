"""Game session model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dentalcare.database.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from dentalcare.database.models.entities import Entity


class SessionStatus(str):
    """Session status values."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class GameSession(Base, TimestampMixin):
    """A save slot. Every dental row is scoped to one session."""

    __tablename__ = "game_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    session_name: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Player character reference
    player_entity_id: Mapped[int | None] = mapped_column(
        ForeignKey("entities.id", ondelete="SET NULL", use_alter=True),
        nullable=True,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        default=SessionStatus.ACTIVE,
        nullable=False,
    )
    total_turns: Mapped[int] = mapped_column(default=0, nullable=False)

    # Relationships
    entities: Mapped[list["Entity"]] = relationship(
        back_populates="session",
        cascade="all, delete-orphan",
        foreign_keys="Entity.session_id",
    )

    def __repr__(self) -> str:
        return f"<GameSession {self.id}: {self.session_name}>"
