"""Progression Manager for experience and skill levels.

Experience accumulates per skill track. Levels are reached at cumulative
thresholds; each level needs more experience than the last:

    Level:  1   2    3    4     5     6     7     8     9    10
    XP:    75 150  300  750  1500  3000  4500  6000  7500  9000   (per level)

Levels only go up from experience. A level set directly (training, a
starting profession) is never lowered by the table.
"""

import logging
from dataclasses import dataclass
from itertools import accumulate

from sqlalchemy import and_

from dentalcare.database.models.entities import EntitySkill
from dentalcare.managers.base import BaseManager

logger = logging.getLogger(__name__)

# Experience required for each level, in order
LEVEL_XP_COSTS = [75, 150, 300, 750, 1500, 3000, 4500, 6000, 7500, 9000]

# Total experience needed to reach each level (index 0 is level 1)
LEVEL_THRESHOLDS = list(accumulate(LEVEL_XP_COSTS))


@dataclass
class ExperienceAward:
    """Result of awarding experience."""

    skill_key: str
    amount: int
    total_experience: int
    old_level: int
    new_level: int

    @property
    def leveled_up(self) -> bool:
        return self.new_level > self.old_level


def level_for_experience(experience: int) -> int:
    """Get the level earned by a total amount of experience.

    Examples:
        >>> level_for_experience(0)
        0
        >>> level_for_experience(225)
        2
    """
    level = 0
    for threshold in LEVEL_THRESHOLDS:
        if experience < threshold:
            break
        level += 1
    return level


class ProgressionManager(BaseManager):
    """Manages skill experience and levels for entities."""

    def add_experience(
        self,
        entity_id: int,
        skill_key: str,
        amount: int,
    ) -> ExperienceAward | None:
        """Award experience to a skill track.

        Args:
            entity_id: Entity receiving experience.
            skill_key: Skill track, e.g. 'dental_care'.
            amount: Points to add, must be positive.

        Returns:
            ExperienceAward, or None if the entity is missing or the
            amount is not positive.
        """
        if amount <= 0 or self.get_entity(entity_id) is None:
            return None

        skill = self._get_or_create_skill(entity_id, skill_key)
        old_level = skill.proficiency_level

        skill.experience_points += amount
        skill.proficiency_level = max(
            skill.proficiency_level,
            level_for_experience(skill.experience_points),
        )
        self.db.flush()

        award = ExperienceAward(
            skill_key=skill_key,
            amount=amount,
            total_experience=skill.experience_points,
            old_level=old_level,
            new_level=skill.proficiency_level,
        )
        if award.leveled_up:
            logger.info(
                f"Entity {entity_id} reached {skill_key} level {award.new_level}"
            )
        return award

    def set_skill_level(self, entity_id: int, skill_key: str, level: int) -> EntitySkill | None:
        """Set a raw skill level directly (character creation, training).

        Returns:
            The skill, or None if the entity is missing or level is negative.
        """
        if level < 0 or self.get_entity(entity_id) is None:
            return None

        skill = self._get_or_create_skill(entity_id, skill_key)
        skill.proficiency_level = level
        self.db.flush()
        return skill

    def get_skill(self, entity_id: int, skill_key: str) -> EntitySkill | None:
        """Get a skill record if the entity has one."""
        return (
            self.db.query(EntitySkill)
            .filter(
                and_(
                    EntitySkill.entity_id == entity_id,
                    EntitySkill.skill_key == skill_key,
                )
            )
            .first()
        )

    def get_skill_level(self, entity_id: int, skill_key: str) -> int:
        """Get the raw level for a skill, 0 if never trained."""
        skill = self.get_skill(entity_id, skill_key)
        return skill.proficiency_level if skill else 0

    def get_experience(self, entity_id: int, skill_key: str) -> int:
        """Get total experience for a skill, 0 if never trained."""
        skill = self.get_skill(entity_id, skill_key)
        return skill.experience_points if skill else 0

    def _get_or_create_skill(self, entity_id: int, skill_key: str) -> EntitySkill:
        """Get or create a skill for an entity."""
        skill = self.get_skill(entity_id, skill_key)
        if not skill:
            skill = EntitySkill(
                entity_id=entity_id,
                skill_key=skill_key,
                proficiency_level=0,
                experience_points=0,
            )
            self.db.add(skill)
            self.db.flush()
        return skill
