"""Stateless dental rules.

Provides tooth numbering, the skill gate, and extraction formulas.

Usage:
    >>> from dentalcare.rules import extraction_chance, is_unlocked, tooth_name
    >>> tooth_name(9)
    'Upper Left 1'
"""

# Types
from dentalcare.rules.types import (
    AnestheticSource,
    BodyStateSink,
    Clinician,
    ExperienceSink,
    Practitioner,
    RandomSource,
    RewardSink,
    SkillSource,
    ToothLayout,
)

# Numbering
from dentalcare.rules.dentition import (
    TOOTH_COUNT,
    full_dentition,
    is_valid_index,
    tooth_layout,
    tooth_name,
)

# Skill gate
from dentalcare.rules.skills import (
    DENTAL_SKILL,
    DOCTOR_SKILL,
    MAX_LEVEL,
    UNLOCK_LEVELS,
    get_level,
    get_unlocked_abilities,
    is_unlocked,
)

# Formulas
from dentalcare.rules.formulas import (
    MAX_CHANCE,
    extraction_chance,
    failure_damage,
    tool_modifier_difference,
)

__all__ = [
    # Types
    "AnestheticSource",
    "BodyStateSink",
    "Clinician",
    "ExperienceSink",
    "Practitioner",
    "RandomSource",
    "RewardSink",
    "SkillSource",
    "ToothLayout",
    # Numbering
    "TOOTH_COUNT",
    "full_dentition",
    "is_valid_index",
    "tooth_layout",
    "tooth_name",
    # Skill gate
    "DENTAL_SKILL",
    "DOCTOR_SKILL",
    "MAX_LEVEL",
    "UNLOCK_LEVELS",
    "get_level",
    "get_unlocked_abilities",
    "is_unlocked",
    # Formulas
    "MAX_CHANCE",
    "extraction_chance",
    "failure_damage",
    "tool_modifier_difference",
]
