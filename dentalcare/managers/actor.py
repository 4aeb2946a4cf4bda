"""Database-backed actor implementing the dental capability protocols."""

from sqlalchemy.orm import Session

from dentalcare.database.models.entities import Entity
from dentalcare.database.models.session import GameSession
from dentalcare.managers.anesthetic import AnestheticManager
from dentalcare.managers.injuries import InjuryManager
from dentalcare.managers.item_manager import ItemManager
from dentalcare.managers.progression_manager import ProgressionManager


class EntityActor:
    """An entity seen through the narrow interfaces the rules use.

    Implements SkillSource, AnestheticSource, RewardSink, ExperienceSink
    and BodyStateSink.
    """

    def __init__(self, db: Session, game_session: GameSession, entity: Entity) -> None:
        self.entity = entity
        self.progression = ProgressionManager(db, game_session)
        self.anesthetic = AnestheticManager(db, game_session)
        self.items = ItemManager(db, game_session)
        self.injuries = InjuryManager(db, game_session)

    @classmethod
    def for_key(
        cls,
        db: Session,
        game_session: GameSession,
        entity_key: str,
    ) -> "EntityActor | None":
        """Build an actor for an entity key, or None if it doesn't exist."""
        entity = ProgressionManager(db, game_session).get_entity_by_key(entity_key)
        if entity is None:
            return None
        return cls(db, game_session, entity)

    @property
    def entity_id(self) -> int:
        return self.entity.id

    # SkillSource
    def get_skill_level(self, skill_key: str) -> int:
        return self.progression.get_skill_level(self.entity_id, skill_key)

    # AnestheticSource
    def is_numbed(self) -> bool:
        return self.anesthetic.is_numbed(self.entity_id)

    # RewardSink
    def add_item(self, item_key: str):
        return self.items.add_item(self.entity_id, item_key)

    # ExperienceSink
    def add_experience(self, skill_key: str, amount: int):
        return self.progression.add_experience(self.entity_id, skill_key, amount)

    # BodyStateSink
    def apply_wound(
        self,
        pain: int,
        bleeding: bool = False,
        deep_wound: bool = False,
        caused_by: str = "dental work",
    ):
        return self.injuries.apply_wound(
            self.entity_id,
            pain,
            bleeding=bleeding,
            deep_wound=deep_wound,
            caused_by=caused_by,
        )

    def __repr__(self) -> str:
        return f"<EntityActor {self.entity.entity_key}>"
