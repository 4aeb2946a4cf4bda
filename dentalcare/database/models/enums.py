"""Enumerations used across dental models."""

from enum import Enum


class EntityType(str, Enum):
    """Types of entities in the game."""

    PLAYER = "player"
    NPC = "npc"
    MONSTER = "monster"
    ANIMAL = "animal"


class ToothState(str, Enum):
    """Condition of a single tooth.

    EXTRACTED is terminal: nothing transitions out of it.
    """

    HEALTHY = "healthy"
    CAVITY = "cavity"
    INFECTED = "infected"
    BROKEN = "broken"
    EXTRACTED = "extracted"


class JawPosition(str, Enum):
    """Which jaw a tooth sits in."""

    UPPER = "upper"
    LOWER = "lower"


class JawSide(str, Enum):
    """Which side of the mouth a tooth sits on (patient's perspective)."""

    LEFT = "left"
    RIGHT = "right"


class ExtractionMethod(str, Enum):
    """Tools that can pull a tooth."""

    PLIERS = "pliers"
    HAMMER = "hammer"


class DentalAbility(str, Enum):
    """Abilities gated behind dental skill levels."""

    CAVITY_FILL = "cavity_fill"
    CRAFT_TOOLS = "craft_tools"


class ItemType(str, Enum):
    """Item type categories."""

    CONSUMABLE = "consumable"  # Stackable (anesthetic, fillings)
    TOOL = "tool"  # Pliers, hammer
    MISC = "misc"  # Default, trophies like pulled teeth


class BodyPart(str, Enum):
    """Body parts that can carry a wound."""

    HEAD = "head"
    MOUTH = "mouth"
    JAW = "jaw"


class InjuryType(str, Enum):
    """Wounds that dental work can leave behind."""

    LACERATION = "laceration"  # Torn gum
    FRACTURE = "fracture"  # Cracked jaw or root
    DEEP_WOUND = "deep_wound"  # Open socket, infection risk


class InjurySeverity(str, Enum):
    """Injury severity levels."""

    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"
