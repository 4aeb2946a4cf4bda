"""Database models package."""

from dentalcare.database.models.base import Base, TimestampMixin
from dentalcare.database.models.enums import (
    BodyPart,
    DentalAbility,
    EntityType,
    ExtractionMethod,
    InjurySeverity,
    InjuryType,
    ItemType,
    JawPosition,
    JawSide,
    ToothState,
)
from dentalcare.database.models.session import GameSession, SessionStatus
from dentalcare.database.models.entities import Entity, EntitySkill
from dentalcare.database.models.dental import CorpseDentalRecord, DentalProfile, Tooth
from dentalcare.database.models.items import Item
from dentalcare.database.models.injuries import BodyInjury

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Enums
    "BodyPart",
    "DentalAbility",
    "EntityType",
    "ExtractionMethod",
    "InjurySeverity",
    "InjuryType",
    "ItemType",
    "JawPosition",
    "JawSide",
    "ToothState",
    # Session
    "GameSession",
    "SessionStatus",
    # Entities
    "Entity",
    "EntitySkill",
    # Dental
    "CorpseDentalRecord",
    "DentalProfile",
    "Tooth",
    # Items
    "Item",
    # Injuries
    "BodyInjury",
]
