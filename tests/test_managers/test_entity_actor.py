"""Tests for EntityActor."""

from sqlalchemy.orm import Session

from dentalcare.database.models.entities import Entity
from dentalcare.database.models.session import GameSession
from dentalcare.managers.actor import EntityActor
from dentalcare.managers.item_manager import ZOMBIE_TOOTH
from dentalcare.rules.formulas import extraction_chance
from dentalcare.rules.skills import DENTAL_SKILL, DOCTOR_SKILL
from dentalcare.rules.types import (
    AnestheticSource,
    BodyStateSink,
    ExperienceSink,
    RewardSink,
    SkillSource,
)
from tests.factories import create_dental_profile, create_entity_skill


class TestEntityActor:
    """Tests for the database-backed actor."""

    def test_implements_protocols(
        self, db_session: Session, game_session: GameSession, player_entity: Entity
    ):
        """Verify the actor satisfies every capability protocol."""
        actor = EntityActor(db_session, game_session, player_entity)

        for protocol in (
            SkillSource,
            AnestheticSource,
            RewardSink,
            ExperienceSink,
            BodyStateSink,
        ):
            assert isinstance(actor, protocol)

    def test_for_key(
        self, db_session: Session, game_session: GameSession, player_entity: Entity
    ):
        """Verify actors can be looked up by entity key."""
        actor = EntityActor.for_key(db_session, game_session, "player_survivor")

        assert actor.entity_id == player_entity.id
        assert EntityActor.for_key(db_session, game_session, "nobody") is None

    def test_reads_skills_and_numbing(
        self, db_session: Session, game_session: GameSession, player_entity: Entity
    ):
        """Verify rules see stored skills and anesthetic."""
        create_entity_skill(db_session, player_entity, proficiency_level=2)
        create_entity_skill(
            db_session, player_entity, skill_key=DOCTOR_SKILL, proficiency_level=1
        )
        create_dental_profile(db_session, game_session, player_entity, anesthetic_turns=5)
        actor = EntityActor(db_session, game_session, player_entity)

        assert actor.get_skill_level(DENTAL_SKILL) == 2
        assert actor.is_numbed() is True
        assert extraction_chance(actor) == 95

    def test_writes_reach_managers(
        self, db_session: Session, game_session: GameSession, player_entity: Entity
    ):
        """Verify rewards, experience and wounds are persisted."""
        actor = EntityActor(db_session, game_session, player_entity)

        actor.add_item(ZOMBIE_TOOTH)
        actor.add_experience(DENTAL_SKILL, 25)
        actor.apply_wound(20, bleeding=True)

        assert actor.items.count_items(player_entity.id, ZOMBIE_TOOTH) == 1
        assert actor.progression.get_experience(player_entity.id, DENTAL_SKILL) == 25
        assert actor.injuries.get_body_state(player_entity.id).is_bleeding is True
