"""Dental skill gate.

Turns a raw, unbounded skill value into a level in [0, 10] and decides
which abilities that level unlocks. Every input is validated; bad data
resolves to level 0 and locked abilities rather than an exception.
"""

import math

from dentalcare.database.models.enums import DentalAbility
from dentalcare.rules.types import SkillSource

DENTAL_SKILL = "dental_care"
DOCTOR_SKILL = "doctor"

MAX_LEVEL = 10

# Minimum dental level for each ability
UNLOCK_LEVELS: dict[DentalAbility, int] = {
    DentalAbility.CAVITY_FILL: 3,
    DentalAbility.CRAFT_TOOLS: 5,
}

# Experience awarded to the dental skill track
XP_PRACTICE_SUCCESS = 25
XP_PRACTICE_FAIL = 6
XP_CAVITY_FILL = 30


def read_skill(actor: SkillSource | None, skill_key: str) -> int | float:
    """Read a raw skill value, treating anything unusable as 0."""
    if actor is None:
        return 0
    getter = getattr(actor, "get_skill_level", None)
    if not callable(getter):
        return 0

    raw = getter(skill_key)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return 0
    if math.isnan(raw):
        return 0
    return raw


def clamp_level(raw: int | float) -> int:
    """Clamp a raw value into the 0-10 level range."""
    return int(max(0, min(MAX_LEVEL, raw)))


def get_level(actor: SkillSource | None) -> int:
    """Get the actor's dental level, capped at MAX_LEVEL.

    Args:
        actor: Skill source, or None.

    Returns:
        Level in [0, 10]. Absent actors and invalid values give 0.
    """
    return clamp_level(read_skill(actor, DENTAL_SKILL))


def get_unlock_level(ability: DentalAbility | str) -> int | None:
    """Get the level an ability needs, or None for unknown abilities."""
    try:
        return UNLOCK_LEVELS.get(DentalAbility(ability))
    except (TypeError, ValueError):
        return None


def is_unlocked(actor: SkillSource | None, ability: DentalAbility | str) -> bool:
    """Check whether the actor's level meets an ability's threshold.

    Args:
        actor: Skill source, or None.
        ability: Ability enum or its string value.

    Returns:
        True if unlocked. Unknown abilities and absent actors are locked.
    """
    if actor is None:
        return False
    required = get_unlock_level(ability)
    if required is None:
        return False
    return get_level(actor) >= required


def get_unlocked_abilities(actor: SkillSource | None) -> list[DentalAbility]:
    """All abilities the actor currently has."""
    return [ability for ability in UNLOCK_LEVELS if is_unlocked(actor, ability)]
