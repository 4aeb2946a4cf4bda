"""Tooth registry: the 32 teeth of a character.

Every health or state write goes through ToothManager._transition, which
refuses to move a tooth out of EXTRACTED. Callers never need their own
permanence checks.
"""

import logging
import math
import random

from sqlalchemy.orm import Session

from dentalcare.database.models.dental import Tooth
from dentalcare.database.models.enums import ToothState
from dentalcare.database.models.session import GameSession
from dentalcare.managers.base import BaseManager
from dentalcare.rules.dentition import TOOTH_COUNT, full_dentition, is_valid_index
from dentalcare.rules.types import RandomSource

logger = logging.getLogger(__name__)

FULL_HEALTH = 100


class ToothManager(BaseManager):
    """Creates, queries and mutates a character's teeth."""

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

    def initialize(self, entity_id: int | None) -> bool:
        """Give a character a full set of healthy teeth.

        Calling this again for a character that already has teeth is a
        no-op, so existing damage and extractions are never reset.

        Args:
            entity_id: Character to set up.

        Returns:
            True if the character has teeth afterwards, False if the
            entity does not exist in this session.
        """
        entity = self.get_entity(entity_id)
        if entity is None:
            logger.debug(f"Cannot initialize teeth: entity {entity_id} not found")
            return False

        if self.is_initialized(entity.id):
            logger.debug(f"Teeth already initialized for entity {entity.id}")
            return True

        for layout in full_dentition():
            self.db.add(
                Tooth(
                    entity_id=entity.id,
                    session_id=self.session_id,
                    tooth_index=layout.index,
                    name=layout.name,
                    position=layout.position,
                    side=layout.side,
                    health=FULL_HEALTH,
                    state=ToothState.HEALTHY,
                )
            )
        self.db.flush()

        logger.info(f"Initialized {TOOTH_COUNT} teeth for {entity.entity_key}")
        return True

    def is_initialized(self, entity_id: int) -> bool:
        """Check whether a character already has teeth."""
        return self._teeth_query(entity_id).first() is not None

    def get_all_teeth(self, entity_id: int) -> list[Tooth]:
        """Get all teeth ordered by index.

        Returns:
            The 32 teeth, or an empty list for an uninitialized character.
        """
        return self._teeth_query(entity_id).order_by(Tooth.tooth_index).all()

    def get_tooth(self, entity_id: int, index: int) -> Tooth | None:
        """Get one tooth by index (1-32).

        Returns:
            Tooth, or None if the index is invalid or the character has
            no teeth.
        """
        if not is_valid_index(index):
            return None
        return self._teeth_query(entity_id).filter(Tooth.tooth_index == index).first()

    def get_remaining_teeth(self, entity_id: int) -> list[Tooth]:
        """Get all teeth that have not been extracted."""
        return (
            self._teeth_query(entity_id)
            .filter(Tooth.state != ToothState.EXTRACTED)
            .order_by(Tooth.tooth_index)
            .all()
        )

    def get_remaining_count(self, entity_id: int) -> int:
        """Count teeth that have not been extracted."""
        return (
            self._teeth_query(entity_id)
            .filter(Tooth.state != ToothState.EXTRACTED)
            .count()
        )

    def get_overall_health(self, entity_id: int) -> float:
        """Average health of the teeth still in the mouth.

        Returns:
            Mean health in [0, 100]; 0.0 if no teeth remain.
        """
        remaining = self.get_remaining_teeth(entity_id)
        if not remaining:
            return 0.0
        return sum(tooth.health for tooth in remaining) / len(remaining)

    def set_tooth_state(
        self,
        entity_id: int,
        index: int,
        state: ToothState | str,
    ) -> bool:
        """Set a tooth's condition.

        Args:
            entity_id: Owning character.
            index: Tooth index, 1-32.
            state: New state.

        Returns:
            True if applied. False for an unknown state, a missing tooth,
            or an attempt to move an extracted tooth to another state.
        """
        try:
            new_state = ToothState(state)
        except (TypeError, ValueError):
            return False

        tooth = self.get_tooth(entity_id, index)
        if tooth is None:
            return False

        return self._transition(tooth, state=new_state)

    def apply_damage(self, entity_id: int, amount: int) -> int | None:
        """Damage one random remaining tooth.

        A tooth driven to 0 health breaks unless it is already broken.

        Args:
            entity_id: Owning character.
            amount: Health to remove, must be positive.

        Returns:
            Index of the tooth hit, or None if amount is not a positive
            finite number or no teeth remain.
        """
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return None
        if not math.isfinite(amount) or amount <= 0:
            return None

        candidates = self.get_remaining_teeth(entity_id)
        if not candidates:
            return None

        tooth = candidates[self._pick(len(candidates))]
        new_health = self._clamp(tooth.health - amount)
        new_state = tooth.state
        if new_health == 0 and tooth.state != ToothState.BROKEN:
            new_state = ToothState.BROKEN

        self._transition(tooth, state=new_state, health=new_health)
        logger.debug(
            f"Tooth {tooth.tooth_index} of entity {entity_id} took {amount} damage "
            f"({tooth.health}% {tooth.state.value})"
        )
        return tooth.tooth_index

    def extract_tooth(self, entity_id: int, index: int) -> bool:
        """Pull a tooth. Permanent.

        Returns:
            True if extracted, False if the tooth is missing or already out.
        """
        tooth = self.get_tooth(entity_id, index)
        if tooth is None or tooth.is_extracted:
            return False

        self._transition(tooth, state=ToothState.EXTRACTED, health=0)
        logger.info(f"Extracted tooth {index} ({tooth.name}) from entity {entity_id}")
        return True

    def _transition(
        self,
        tooth: Tooth,
        state: ToothState,
        health: int | None = None,
    ) -> bool:
        """Apply a state and optional health change to a tooth.

        The only writer of Tooth.state and Tooth.health.
        """
        if tooth.is_extracted:
            if state != ToothState.EXTRACTED or health not in (None, tooth.health):
                logger.debug(
                    f"Rejected change to extracted tooth {tooth.tooth_index} "
                    f"of entity {tooth.entity_id}"
                )
                return False
            return True

        tooth.state = state
        if health is not None:
            tooth.health = self._clamp(health)
        self.db.flush()
        return True

    def _pick(self, count: int) -> int:
        """Draw a uniform index into a sequence of the given length."""
        return min(int(self.rng() * count), count - 1)

    def _teeth_query(self, entity_id: int):
        return self.db.query(Tooth).filter(
            Tooth.entity_id == entity_id,
            Tooth.session_id == self.session_id,
        )
