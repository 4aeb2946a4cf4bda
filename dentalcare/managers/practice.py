"""Corpse practice: pulling teeth from the dead to train dental skill.

Each corpse yields at most five attempts. An attempt always uses up one
tooth, successful or not. Practice is safe: a failed pull costs the
practitioner nothing but time, so nothing here touches the actor's body
state.
"""

import logging
import random
from dataclasses import dataclass

from sqlalchemy.orm import Session

from dentalcare.database.models.dental import CorpseDentalRecord
from dentalcare.database.models.enums import EntityType, ExtractionMethod
from dentalcare.database.models.session import GameSession
from dentalcare.managers.base import BaseManager
from dentalcare.managers.item_manager import ZOMBIE_TOOTH
from dentalcare.rules.formulas import extraction_chance
from dentalcare.rules.skills import DENTAL_SKILL, XP_PRACTICE_FAIL, XP_PRACTICE_SUCCESS
from dentalcare.rules.types import (
    ExperienceSink,
    Practitioner,
    RandomSource,
    RewardSink,
)

logger = logging.getLogger(__name__)

MAX_TEETH_PER_CORPSE = 5


@dataclass
class PracticeAttempt:
    """Outcome of one accepted practice extraction."""

    success: bool
    roll: int
    chance: int
    experience: int
    reward_item: str | None
    teeth_remaining: int


class PracticeManager(BaseManager):
    """Tracks and resolves practice extractions on corpses."""

    def __init__(
        self,
        db: Session,
        game_session: GameSession,
        rng: RandomSource = random.random,
    ) -> None:
        """Initialize with database session, game session and random source.

        Args:
            db: SQLAlchemy database session
            game_session: Current game session for scoping queries
            rng: Callable returning a uniform float in [0, 1)
        """
        super().__init__(db, game_session)
        self.rng = rng

    def is_eligible(self, corpse_id: int | None) -> bool:
        """Check that an entity is a non-player corpse in this session."""
        corpse = self.get_entity(corpse_id)
        return (
            corpse is not None
            and not corpse.is_alive
            and corpse.entity_type != EntityType.PLAYER
        )

    def get_record(self, corpse_id: int) -> CorpseDentalRecord | None:
        """Get the practice record for a corpse, if one exists."""
        return (
            self.db.query(CorpseDentalRecord)
            .filter(
                CorpseDentalRecord.entity_id == corpse_id,
                CorpseDentalRecord.session_id == self.session_id,
            )
            .first()
        )

    def teeth_remaining(self, corpse_id: int | None) -> int:
        """Practice teeth left on a corpse.

        Returns:
            0-5. Missing or ineligible entities have none.
        """
        if not self.is_eligible(corpse_id):
            return 0
        record = self.get_record(corpse_id)
        extracted = record.teeth_extracted if record else 0
        return max(0, MAX_TEETH_PER_CORPSE - extracted)

    def can_practice(self, corpse_id: int | None) -> bool:
        """Check whether a corpse has practice teeth left."""
        return self.teeth_remaining(corpse_id) > 0

    def attempt_extraction(
        self,
        actor: Practitioner | None,
        corpse_id: int | None,
    ) -> PracticeAttempt | None:
        """Practice pulling a tooth from a corpse with pliers.

        Uses up one tooth regardless of outcome. Success grants a zombie
        tooth and full practice experience; failure grants reduced
        experience. The actor is never hurt either way.

        Args:
            actor: The practitioner.
            corpse_id: Corpse entity ID.

        Returns:
            PracticeAttempt, or None if the attempt was rejected (no
            actor, an actor that can't take rewards or experience, no
            corpse, or no teeth left). Nothing changes on rejection.
        """
        if not self._can_be_rewarded(actor) or not self.can_practice(corpse_id):
            logger.debug(f"Practice on entity {corpse_id} rejected")
            return None

        record = self._get_or_create_record(corpse_id)
        record.teeth_extracted += 1
        self.db.flush()

        chance = extraction_chance(actor, ExtractionMethod.PLIERS)
        roll = self._roll_percent()
        success = roll < chance

        if success:
            actor.add_item(ZOMBIE_TOOTH)
            actor.add_experience(DENTAL_SKILL, XP_PRACTICE_SUCCESS)
            experience = XP_PRACTICE_SUCCESS
        else:
            actor.add_experience(DENTAL_SKILL, XP_PRACTICE_FAIL)
            experience = XP_PRACTICE_FAIL

        remaining = max(0, MAX_TEETH_PER_CORPSE - record.teeth_extracted)
        logger.info(
            f"Practice on entity {corpse_id}: roll {roll} vs {chance} "
            f"{'succeeded' if success else 'failed'}, {remaining} teeth left"
        )
        return PracticeAttempt(
            success=success,
            roll=roll,
            chance=chance,
            experience=experience,
            reward_item=ZOMBIE_TOOTH if success else None,
            teeth_remaining=remaining,
        )

    def _can_be_rewarded(self, actor: object) -> bool:
        return isinstance(actor, RewardSink) and isinstance(actor, ExperienceSink)

    def _roll_percent(self) -> int:
        """Uniform integer in [0, 100)."""
        return min(int(self.rng() * 100), 99)

    def _get_or_create_record(self, corpse_id: int) -> CorpseDentalRecord:
        record = self.get_record(corpse_id)
        if record is None:
            record = CorpseDentalRecord(
                entity_id=corpse_id,
                session_id=self.session_id,
                teeth_extracted=0,
            )
            self.db.add(record)
            self.db.flush()
        return record
