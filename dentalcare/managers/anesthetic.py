"""Numbing timer for characters."""

import logging

from dentalcare.database.models.dental import DentalProfile
from dentalcare.managers.base import BaseManager

logger = logging.getLogger(__name__)

# Turns of numbing from one dose
DEFAULT_ANESTHETIC_TURNS = 30


class AnestheticManager(BaseManager):
    """Applies, checks and counts down anesthetic numbing."""

    def get_profile(self, entity_id: int) -> DentalProfile | None:
        """Get the dental profile for an entity, if it has one."""
        return (
            self.db.query(DentalProfile)
            .filter(
                DentalProfile.entity_id == entity_id,
                DentalProfile.session_id == self.session_id,
            )
            .first()
        )

    def apply_anesthetic(
        self,
        entity_id: int,
        turns: int = DEFAULT_ANESTHETIC_TURNS,
    ) -> bool:
        """Numb an entity for a number of turns.

        A new dose replaces the remaining time if it lasts longer.

        Returns:
            True if applied, False if the entity is missing or turns is
            not positive.
        """
        if turns <= 0 or self.get_entity(entity_id) is None:
            return False

        profile = self._get_or_create_profile(entity_id)
        profile.anesthetic_turns = max(profile.anesthetic_turns, turns)
        self.db.flush()

        logger.debug(f"Entity {entity_id} numbed for {profile.anesthetic_turns} turns")
        return True

    def is_numbed(self, entity_id: int) -> bool:
        """Check whether an entity is currently numbed."""
        profile = self.get_profile(entity_id)
        return profile is not None and profile.anesthetic_turns > 0

    def tick(self, entity_id: int, turns: int = 1) -> int:
        """Count numbing down by some turns.

        Returns:
            Turns of numbing left (0 when worn off or never applied).
        """
        profile = self.get_profile(entity_id)
        if profile is None:
            return 0

        if turns > 0 and profile.anesthetic_turns > 0:
            profile.anesthetic_turns = max(0, profile.anesthetic_turns - turns)
            self.db.flush()
            if profile.anesthetic_turns == 0:
                logger.debug(f"Anesthetic wore off for entity {entity_id}")
        return profile.anesthetic_turns

    def _get_or_create_profile(self, entity_id: int) -> DentalProfile:
        profile = self.get_profile(entity_id)
        if profile is None:
            profile = DentalProfile(
                entity_id=entity_id,
                session_id=self.session_id,
                anesthetic_turns=0,
            )
            self.db.add(profile)
            self.db.flush()
        return profile
