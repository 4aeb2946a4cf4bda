"""Entity models (characters, NPCs, monsters, corpses)."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dentalcare.database.models.base import Base, TimestampMixin
from dentalcare.database.models.enums import EntityType

if TYPE_CHECKING:
    from dentalcare.database.models.dental import (
        CorpseDentalRecord,
        DentalProfile,
        Tooth,
    )
    from dentalcare.database.models.session import GameSession


class Entity(Base, TimestampMixin):
    """Base entity for all characters and creatures.

    A dead non-player entity is a corpse and can be practiced on.
    """

    __tablename__ = "entities"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    session_id: Mapped[int] = mapped_column(
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Identity
    entity_key: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Lowercase unique key (e.g., 'survivor_kate')",
    )
    display_name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Display name (e.g., 'Kate the Survivor')",
    )
    entity_type: Mapped[EntityType] = mapped_column(
        Enum(EntityType, values_callable=lambda obj: [e.value for e in obj]),
        nullable=False,
    )

    # Status
    is_alive: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    session: Mapped["GameSession"] = relationship(
        back_populates="entities",
        foreign_keys=[session_id],
    )
    skills: Mapped[list["EntitySkill"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
    )
    teeth: Mapped[list["Tooth"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        order_by="Tooth.tooth_index",
    )
    dental_profile: Mapped["DentalProfile | None"] = relationship(
        back_populates="entity",
        uselist=False,
        cascade="all, delete-orphan",
    )
    corpse_record: Mapped["CorpseDentalRecord | None"] = relationship(
        back_populates="entity",
        uselist=False,
        cascade="all, delete-orphan",
    )

    # Unique constraint
    __table_args__ = (
        UniqueConstraint("session_id", "entity_key", name="uq_entity_session_key"),
    )

    def __repr__(self) -> str:
        return f"<Entity {self.entity_key} ({self.entity_type.value})>"


class EntitySkill(Base):
    """Skills an entity has learned.

    proficiency_level is the raw progression value; it is unbounded here
    and clamped by the skill gate when read.
    """

    __tablename__ = "entity_skills"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    entity_id: Mapped[int] = mapped_column(
        ForeignKey("entities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    skill_key: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Skill name: dental_care, doctor",
    )
    proficiency_level: Mapped[int] = mapped_column(
        default=0,
        nullable=False,
        comment="Raw level, 0 or higher",
    )
    experience_points: Mapped[int] = mapped_column(
        default=0,
        nullable=False,
    )

    # Relationships
    entity: Mapped["Entity"] = relationship(back_populates="skills")

    # Unique constraint
    __table_args__ = (
        UniqueConstraint("entity_id", "skill_key", name="uq_entity_skill"),
    )

    def __repr__(self) -> str:
        return f"<EntitySkill {self.skill_key} L{self.proficiency_level}>"
