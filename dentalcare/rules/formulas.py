"""Extraction success and failure-damage formulas.

Pure functions over an actor's skills and numbing state. Randomness is
not drawn here; callers roll against the returned chance themselves.

Success chance:
    base (pliers 60, hammer 35)
    + dental level x 5
    + doctor level x 10
    + 30 while numbed
    capped at 95

Failure damage:
    max(10, 50 - dental level x 4)
"""

from dentalcare.database.models.enums import ExtractionMethod
from dentalcare.rules.skills import DOCTOR_SKILL, get_level, read_skill
from dentalcare.rules.types import Clinician

# Base chances by tool
BASE_CHANCE: dict[ExtractionMethod, int] = {
    ExtractionMethod.PLIERS: 60,
    ExtractionMethod.HAMMER: 35,
}

# Bonuses
SKILL_BONUS = 5
DOCTOR_BONUS = 10
ANESTHETIC_BONUS = 30

MAX_CHANCE = 95

# Failure damage
BASE_FAILURE_DAMAGE = 50
DAMAGE_REDUCTION_PER_LEVEL = 4
MIN_FAILURE_DAMAGE = 10


def _is_numbed(actor: Clinician) -> bool:
    checker = getattr(actor, "is_numbed", None)
    return bool(checker()) if callable(checker) else False


def extraction_chance(
    actor: Clinician | None,
    method: ExtractionMethod | str = ExtractionMethod.PLIERS,
) -> int:
    """Calculate the percent chance that an extraction succeeds.

    Args:
        actor: The one pulling the tooth, or None.
        method: Tool used.

    Returns:
        Chance in [0, 95]. Absent actors and unknown tools give 0.

    Examples:
        Dental 2, doctor 1, not numbed, pliers: 60 + 10 + 10 = 80.
        Same actor with a hammer: 35 + 10 + 10 = 55.
    """
    if actor is None:
        return 0
    try:
        base = BASE_CHANCE[ExtractionMethod(method)]
    except (TypeError, ValueError):
        return 0

    chance = (
        base
        + get_level(actor) * SKILL_BONUS
        + read_skill(actor, DOCTOR_SKILL) * DOCTOR_BONUS
        + (ANESTHETIC_BONUS if _is_numbed(actor) else 0)
    )
    return int(max(0, min(chance, MAX_CHANCE)))


def failure_damage(actor: Clinician | None) -> int:
    """Calculate tooth damage dealt by a failed extraction.

    Args:
        actor: The one pulling the tooth, or None.

    Returns:
        Damage in [10, 50], lower at higher dental levels. Absent actors
        take the full base damage.
    """
    if actor is None:
        return BASE_FAILURE_DAMAGE

    damage = BASE_FAILURE_DAMAGE - get_level(actor) * DAMAGE_REDUCTION_PER_LEVEL
    return max(damage, MIN_FAILURE_DAMAGE)


def tool_modifier_difference() -> int:
    """Gap between the pliers and hammer base chances."""
    return BASE_CHANCE[ExtractionMethod.PLIERS] - BASE_CHANCE[ExtractionMethod.HAMMER]
