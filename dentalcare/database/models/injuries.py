"""Injury and body state models."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dentalcare.database.models.base import Base, TimestampMixin
from dentalcare.database.models.enums import BodyPart, InjurySeverity, InjuryType

if TYPE_CHECKING:
    from dentalcare.database.models.entities import Entity


class BodyInjury(Base, TimestampMixin):
    """Tracks wounds on a specific body part."""

    __tablename__ = "body_injuries"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    entity_id: Mapped[int] = mapped_column(
        ForeignKey("entities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    session_id: Mapped[int] = mapped_column(
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Injury details
    body_part: Mapped[BodyPart] = mapped_column(
        Enum(BodyPart, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        comment="Body part affected",
    )
    injury_type: Mapped[InjuryType] = mapped_column(
        Enum(InjuryType, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        comment="laceration, fracture, deep_wound",
    )
    severity: Mapped[InjurySeverity] = mapped_column(
        Enum(InjurySeverity, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
        comment="minor, moderate, severe, critical",
    )

    # Cause
    caused_by: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="What caused this injury",
    )
    occurred_turn: Mapped[int] = mapped_column(nullable=False, index=True)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    # Body state
    current_pain_level: Mapped[int] = mapped_column(
        default=0,
        nullable=False,
        comment="0-100",
    )
    is_bleeding: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )
    has_deep_wound: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )
    is_healed: Mapped[bool] = mapped_column(
        default=False,
        nullable=False,
    )

    # Relationships
    entity: Mapped["Entity"] = relationship(foreign_keys=[entity_id])

    def __repr__(self) -> str:
        healed = " [HEALED]" if self.is_healed else ""
        return (
            f"<BodyInjury {self.body_part.value} "
            f"{self.injury_type.value} ({self.severity.value}){healed}>"
        )
