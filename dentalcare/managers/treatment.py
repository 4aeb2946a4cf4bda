"""Dental treatments that repair rather than remove teeth."""

import logging

from dentalcare.database.models.enums import DentalAbility, ToothState
from dentalcare.managers.teeth import ToothManager
from dentalcare.rules.skills import DENTAL_SKILL, XP_CAVITY_FILL, is_unlocked
from dentalcare.rules.types import ExperienceSink, SkillSource

logger = logging.getLogger(__name__)


class TreatmentManager(ToothManager):
    """Fills cavities once the practitioner has the skill for it."""

    def fill_cavity(
        self,
        actor: SkillSource | None,
        patient_id: int,
        index: int,
    ) -> bool:
        """Fill a cavity, returning the tooth to healthy.

        Requires the cavity_fill unlock. Health is left as it is; only
        the decay is treated.

        Args:
            actor: Practitioner doing the filling.
            patient_id: Character whose tooth is treated (may be the actor).
            index: Tooth index, 1-32.

        Returns:
            True if filled. False if the actor lacks the skill or the
            tooth is missing or has no cavity.
        """
        if not is_unlocked(actor, DentalAbility.CAVITY_FILL):
            logger.debug("Cavity fill rejected: ability locked")
            return False

        tooth = self.get_tooth(patient_id, index)
        if tooth is None or tooth.state != ToothState.CAVITY:
            return False

        if not self._transition(tooth, state=ToothState.HEALTHY):
            return False

        if isinstance(actor, ExperienceSink):
            actor.add_experience(DENTAL_SKILL, XP_CAVITY_FILL)

        logger.info(f"Filled cavity in tooth {index} ({tooth.name}) of entity {patient_id}")
        return True
