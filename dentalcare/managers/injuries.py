"""Injury management for dental wounds (pain, bleeding, open sockets)."""

import logging
from dataclasses import dataclass
from datetime import datetime

from dentalcare.database.models.enums import BodyPart, InjurySeverity, InjuryType
from dentalcare.database.models.injuries import BodyInjury
from dentalcare.managers.base import BaseManager

logger = logging.getLogger(__name__)

# Pain thresholds for severity (0-100)
SEVERITY_BY_PAIN: list[tuple[int, InjurySeverity]] = [
    (75, InjurySeverity.CRITICAL),
    (50, InjurySeverity.SEVERE),
    (25, InjurySeverity.MODERATE),
    (0, InjurySeverity.MINOR),
]


@dataclass(frozen=True)
class BodyState:
    """Summary of an entity's unhealed wounds."""

    pain: int = 0
    is_bleeding: bool = False
    has_deep_wound: bool = False
    injury_count: int = 0


def severity_for_pain(pain: int) -> InjurySeverity:
    """Map a pain level to an injury severity."""
    for threshold, severity in SEVERITY_BY_PAIN:
        if pain >= threshold:
            return severity
    return InjurySeverity.MINOR


class InjuryManager(BaseManager):
    """Manages wounds left by dental work."""

    def get_injuries(self, entity_id: int, active_only: bool = True) -> list[BodyInjury]:
        """Get all injuries for an entity.

        Args:
            entity_id: Entity to query
            active_only: If True, only return unhealed injuries

        Returns:
            List of BodyInjury objects
        """
        query = self.db.query(BodyInjury).filter(
            BodyInjury.entity_id == entity_id,
            BodyInjury.session_id == self.session_id,
        )
        if active_only:
            query = query.filter(BodyInjury.is_healed == False)
        return query.order_by(BodyInjury.id).all()

    def apply_wound(
        self,
        entity_id: int,
        pain: int,
        bleeding: bool = False,
        deep_wound: bool = False,
        caused_by: str = "dental work",
        body_part: BodyPart = BodyPart.MOUTH,
    ) -> BodyInjury | None:
        """Record a wound on an entity.

        Args:
            entity_id: Entity to wound.
            pain: Pain added, clamped to 0-100.
            bleeding: Whether the wound bleeds.
            deep_wound: Whether it leaves an open wound.
            caused_by: What caused it.
            body_part: Where it is.

        Returns:
            Created BodyInjury, or None if the entity is missing.
        """
        if self.get_entity(entity_id) is None:
            return None

        pain_level = self._clamp(pain)
        if deep_wound:
            injury_type = InjuryType.DEEP_WOUND
        elif body_part == BodyPart.JAW:
            injury_type = InjuryType.FRACTURE
        else:
            injury_type = InjuryType.LACERATION

        injury = BodyInjury(
            entity_id=entity_id,
            session_id=self.session_id,
            body_part=body_part,
            injury_type=injury_type,
            severity=severity_for_pain(pain_level),
            caused_by=caused_by,
            occurred_turn=self.current_turn,
            occurred_at=datetime.utcnow(),
            current_pain_level=pain_level,
            is_bleeding=bleeding,
            has_deep_wound=deep_wound,
        )
        self.db.add(injury)
        self.db.flush()

        logger.info(
            f"Entity {entity_id} wounded: {body_part.value} {injury_type.value} "
            f"pain={pain_level} bleeding={bleeding}"
        )
        return injury

    def get_body_state(self, entity_id: int) -> BodyState:
        """Summarize pain, bleeding and wounds across unhealed injuries."""
        injuries = self.get_injuries(entity_id)
        return BodyState(
            pain=self._clamp(sum(i.current_pain_level for i in injuries)),
            is_bleeding=any(i.is_bleeding for i in injuries),
            has_deep_wound=any(i.has_deep_wound for i in injuries),
            injury_count=len(injuries),
        )
