"""Dental state models: teeth, numbing profile, corpse practice counter."""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dentalcare.database.models.base import Base, TimestampMixin
from dentalcare.database.models.enums import JawPosition, JawSide, ToothState

if TYPE_CHECKING:
    from dentalcare.database.models.entities import Entity


class Tooth(Base, TimestampMixin):
    """One of the 32 tracked teeth of a character.

    Index, name, position and side are fixed at creation. Only
    ToothManager should write health and state.
    """

    __tablename__ = "teeth"

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

    # Identity
    tooth_index: Mapped[int] = mapped_column(
        nullable=False,
        comment="1-32, quadrants UR, UL, LL, LR",
    )
    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="e.g. 'Upper Right 3'",
    )
    position: Mapped[JawPosition] = mapped_column(
        Enum(JawPosition, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
    )
    side: Mapped[JawSide] = mapped_column(
        Enum(JawSide, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
    )

    # Condition
    health: Mapped[int] = mapped_column(
        default=100,
        nullable=False,
        comment="0-100",
    )
    state: Mapped[ToothState] = mapped_column(
        Enum(ToothState, values_callable=lambda obj: [e.value for e in obj]),
        default=ToothState.HEALTHY,
        nullable=False,
    )

    # Relationships
    entity: Mapped["Entity"] = relationship(back_populates="teeth")

    __table_args__ = (
        UniqueConstraint("entity_id", "tooth_index", name="uq_entity_tooth_index"),
        CheckConstraint("tooth_index BETWEEN 1 AND 32", name="ck_tooth_index_range"),
        CheckConstraint("health BETWEEN 0 AND 100", name="ck_tooth_health_range"),
    )

    @property
    def is_extracted(self) -> bool:
        return self.state == ToothState.EXTRACTED

    def __repr__(self) -> str:
        return f"<Tooth {self.tooth_index} {self.name} {self.state.value} {self.health}%>"


class DentalProfile(Base, TimestampMixin):
    """Per-character dental condition that isn't tied to a single tooth."""

    __tablename__ = "dental_profiles"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    entity_id: Mapped[int] = mapped_column(
        ForeignKey("entities.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    session_id: Mapped[int] = mapped_column(
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    anesthetic_turns: Mapped[int] = mapped_column(
        default=0,
        nullable=False,
        comment="Turns of numbing left; numbed while > 0",
    )

    # Relationships
    entity: Mapped["Entity"] = relationship(back_populates="dental_profile")

    __table_args__ = (
        CheckConstraint("anesthetic_turns >= 0", name="ck_anesthetic_turns_positive"),
    )

    def __repr__(self) -> str:
        return f"<DentalProfile entity={self.entity_id} numb={self.anesthetic_turns}>"


class CorpseDentalRecord(Base, TimestampMixin):
    """How many practice teeth have been pulled from a corpse."""

    __tablename__ = "corpse_dental_records"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    entity_id: Mapped[int] = mapped_column(
        ForeignKey("entities.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    session_id: Mapped[int] = mapped_column(
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    teeth_extracted: Mapped[int] = mapped_column(
        default=0,
        nullable=False,
        comment="Only ever increases",
    )

    # Relationships
    entity: Mapped["Entity"] = relationship(back_populates="corpse_record")

    __table_args__ = (
        CheckConstraint("teeth_extracted >= 0", name="ck_teeth_extracted_positive"),
    )

    def __repr__(self) -> str:
        return f"<CorpseDentalRecord entity={self.entity_id} pulled={self.teeth_extracted}>"
