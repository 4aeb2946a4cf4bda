"""Manager classes for dental state and game logic."""

from dentalcare.managers.base import BaseManager
from dentalcare.managers.actor import EntityActor
from dentalcare.managers.anesthetic import DEFAULT_ANESTHETIC_TURNS, AnestheticManager
from dentalcare.managers.injuries import BodyState, InjuryManager
from dentalcare.managers.item_manager import ITEM_CATALOG, ItemDefinition, ItemManager
from dentalcare.managers.practice import (
    MAX_TEETH_PER_CORPSE,
    PracticeAttempt,
    PracticeManager,
)
from dentalcare.managers.progression_manager import ExperienceAward, ProgressionManager
from dentalcare.managers.teeth import ToothManager
from dentalcare.managers.treatment import TreatmentManager

__all__ = [
    "BaseManager",
    "EntityActor",
    "AnestheticManager",
    "DEFAULT_ANESTHETIC_TURNS",
    "BodyState",
    "InjuryManager",
    "ITEM_CATALOG",
    "ItemDefinition",
    "ItemManager",
    "MAX_TEETH_PER_CORPSE",
    "PracticeAttempt",
    "PracticeManager",
    "ExperienceAward",
    "ProgressionManager",
    "ToothManager",
    "TreatmentManager",
]
