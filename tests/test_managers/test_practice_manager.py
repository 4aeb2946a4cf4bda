"""Tests for PracticeManager class."""

import pytest
from sqlalchemy.orm import Session

from dentalcare.database.models.entities import Entity
from dentalcare.database.models.enums import EntityType
from dentalcare.database.models.injuries import BodyInjury
from dentalcare.database.models.session import GameSession
from dentalcare.managers.actor import EntityActor
from dentalcare.managers.injuries import BodyState, InjuryManager
from dentalcare.managers.item_manager import ZOMBIE_TOOTH, ItemManager
from dentalcare.managers.practice import MAX_TEETH_PER_CORPSE, PracticeManager
from dentalcare.managers.progression_manager import ProgressionManager
from dentalcare.rules.skills import DENTAL_SKILL
from tests.factories import (
    StubActor,
    create_body_injury,
    create_corpse,
    create_corpse_record,
    create_entity,
    sequence_rng,
)

ALWAYS_SUCCEED = sequence_rng(0.0)
ALWAYS_FAIL = sequence_rng(0.99)


class TestEligibility:
    """Tests for which entities can be practiced on."""

    def test_dead_monster_is_eligible(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify a fresh corpse has five practice teeth."""
        manager = PracticeManager(db_session, game_session)

        assert manager.is_eligible(corpse_entity.id) is True
        assert manager.teeth_remaining(corpse_entity.id) == MAX_TEETH_PER_CORPSE
        assert manager.can_practice(corpse_entity.id) is True

    def test_living_entity_not_eligible(
        self, db_session: Session, game_session: GameSession
    ):
        """Verify living entities can't be practiced on."""
        living = create_entity(db_session, game_session, EntityType.MONSTER)
        manager = PracticeManager(db_session, game_session)

        assert manager.is_eligible(living.id) is False
        assert manager.teeth_remaining(living.id) == 0

    def test_dead_player_not_eligible(
        self, db_session: Session, game_session: GameSession
    ):
        """Verify player corpses are never practice targets."""
        dead_player = create_entity(
            db_session, game_session, EntityType.PLAYER, is_alive=False
        )
        manager = PracticeManager(db_session, game_session)

        assert manager.is_eligible(dead_player.id) is False

    def test_missing_entity_not_eligible(
        self, db_session: Session, game_session: GameSession
    ):
        """Verify unknown IDs have no teeth to practice on."""
        manager = PracticeManager(db_session, game_session)

        assert manager.is_eligible(99999) is False
        assert manager.is_eligible(None) is False
        assert manager.teeth_remaining(None) == 0

    def test_corpse_in_other_session_not_eligible(
        self,
        db_session: Session,
        game_session: GameSession,
        game_session_2: GameSession,
    ):
        """Verify practice is scoped to the manager's session."""
        corpse = create_corpse(db_session, game_session_2)
        manager = PracticeManager(db_session, game_session)

        assert manager.can_practice(corpse.id) is False

    def test_remaining_reflects_record(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify remaining teeth come from the stored counter."""
        create_corpse_record(db_session, game_session, corpse_entity, teeth_extracted=3)
        manager = PracticeManager(db_session, game_session)

        assert manager.teeth_remaining(corpse_entity.id) == 2

    def test_no_record_until_first_attempt(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify checking a corpse doesn't create a record."""
        manager = PracticeManager(db_session, game_session)

        manager.teeth_remaining(corpse_entity.id)

        assert manager.get_record(corpse_entity.id) is None


class TestAttemptExtraction:
    """Tests for practice attempts with a stub actor."""

    def test_success_grants_tooth_and_experience(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify a successful pull rewards a zombie tooth and 25 XP."""
        actor = StubActor()
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_SUCCEED)

        attempt = manager.attempt_extraction(actor, corpse_entity.id)

        assert attempt.success is True
        assert attempt.chance == 60
        assert attempt.roll == 0
        assert attempt.experience == 25
        assert attempt.reward_item == ZOMBIE_TOOTH
        assert attempt.teeth_remaining == 4
        assert actor.items == [ZOMBIE_TOOTH]
        assert actor.experience == [(DENTAL_SKILL, 25)]

    def test_failure_grants_reduced_experience_only(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify a failed pull gives 6 XP and no reward."""
        actor = StubActor()
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_FAIL)

        attempt = manager.attempt_extraction(actor, corpse_entity.id)

        assert attempt.success is False
        assert attempt.roll == 99
        assert attempt.experience == 6
        assert attempt.reward_item is None
        assert actor.items == []
        assert actor.experience == [(DENTAL_SKILL, 6)]

    def test_failure_never_wounds_actor(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify practice failures don't touch the actor's body."""
        actor = StubActor()
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_FAIL)

        for _ in range(MAX_TEETH_PER_CORPSE):
            manager.attempt_extraction(actor, corpse_entity.id)

        assert actor.wounds == []

    def test_roll_compared_strictly_below_chance(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify a roll equal to the chance fails."""
        manager = PracticeManager(db_session, game_session, rng=sequence_rng(0.605))

        attempt = manager.attempt_extraction(StubActor(), corpse_entity.id)

        assert attempt.roll == 60
        assert attempt.success is False

    def test_chance_uses_pliers_and_actor_skill(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify practice rolls against the pliers chance."""
        actor = StubActor(dental=2, doctor=1)
        manager = PracticeManager(db_session, game_session, rng=sequence_rng(0.79))

        attempt = manager.attempt_extraction(actor, corpse_entity.id)

        assert attempt.chance == 80
        assert attempt.success is True

    def test_caps_at_five_attempts(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify the sixth attempt is rejected without side effects."""
        actor = StubActor()
        manager = PracticeManager(
            db_session, game_session, rng=sequence_rng(0.0, 0.99)
        )

        attempts = [
            manager.attempt_extraction(actor, corpse_entity.id)
            for _ in range(MAX_TEETH_PER_CORPSE)
        ]
        items_before = len(actor.items)
        rejected = manager.attempt_extraction(actor, corpse_entity.id)

        assert all(attempt is not None for attempt in attempts)
        assert [a.teeth_remaining for a in attempts] == [4, 3, 2, 1, 0]
        assert rejected is None
        assert items_before == 3
        assert len(actor.items) == items_before
        assert manager.get_record(corpse_entity.id).teeth_extracted == 5
        assert len(actor.experience) == 5
        assert manager.can_practice(corpse_entity.id) is False

    def test_failed_attempt_still_uses_tooth(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify every accepted attempt counts against the cap."""
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_FAIL)

        manager.attempt_extraction(StubActor(), corpse_entity.id)

        assert manager.teeth_remaining(corpse_entity.id) == 4

    def test_none_actor_rejected(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify an absent actor changes nothing."""
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_SUCCEED)

        assert manager.attempt_extraction(None, corpse_entity.id) is None
        assert manager.get_record(corpse_entity.id) is None

    def test_actor_without_reward_sinks_rejected(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify an actor that can't take items or experience uses up nothing."""

        class SkillOnly:
            def get_skill_level(self, skill_key):
                return 5

            def is_numbed(self):
                return False

        manager = PracticeManager(db_session, game_session, rng=ALWAYS_SUCCEED)

        assert manager.attempt_extraction(SkillOnly(), corpse_entity.id) is None
        assert manager.get_record(corpse_entity.id) is None
        assert manager.teeth_remaining(corpse_entity.id) == MAX_TEETH_PER_CORPSE

    def test_living_target_rejected(
        self, db_session: Session, game_session: GameSession, player_entity: Entity
    ):
        """Verify living targets can't be practiced on."""
        actor = StubActor()
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_SUCCEED)

        assert manager.attempt_extraction(actor, player_entity.id) is None
        assert actor.experience == []

    def test_corpses_tracked_independently(
        self, db_session: Session, game_session: GameSession, corpse_entity: Entity
    ):
        """Verify each corpse has its own five teeth."""
        second = create_corpse(db_session, game_session)
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_FAIL)

        for _ in range(MAX_TEETH_PER_CORPSE):
            manager.attempt_extraction(StubActor(), corpse_entity.id)

        assert manager.teeth_remaining(second.id) == 5
        assert manager.attempt_extraction(StubActor(), second.id) is not None


class TestPracticeWithEntityActor:
    """Tests for practice against database-backed actors."""

    @pytest.fixture
    def practitioner(
        self, db_session: Session, game_session: GameSession, player_entity: Entity
    ) -> EntityActor:
        return EntityActor(db_session, game_session, player_entity)

    def test_success_lands_in_inventory_and_skill(
        self,
        db_session: Session,
        game_session: GameSession,
        player_entity: Entity,
        corpse_entity: Entity,
        practitioner: EntityActor,
    ):
        """Verify rewards and experience persist on the entity."""
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_SUCCEED)

        manager.attempt_extraction(practitioner, corpse_entity.id)
        manager.attempt_extraction(practitioner, corpse_entity.id)

        items = ItemManager(db_session, game_session)
        progression = ProgressionManager(db_session, game_session)
        assert items.count_items(player_entity.id, ZOMBIE_TOOTH) == 2
        assert progression.get_experience(player_entity.id, DENTAL_SKILL) == 50

    def test_full_corpse_levels_up_practitioner(
        self,
        db_session: Session,
        game_session: GameSession,
        player_entity: Entity,
        corpse_entity: Entity,
        practitioner: EntityActor,
    ):
        """Verify five successful pulls reach dental level 1."""
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_SUCCEED)

        for _ in range(MAX_TEETH_PER_CORPSE):
            manager.attempt_extraction(practitioner, corpse_entity.id)

        assert practitioner.get_skill_level(DENTAL_SKILL) == 1

    def test_failures_leave_body_state_unchanged(
        self,
        db_session: Session,
        game_session: GameSession,
        player_entity: Entity,
        corpse_entity: Entity,
        practitioner: EntityActor,
    ):
        """Verify failed practice creates no injuries."""
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_FAIL)

        for _ in range(MAX_TEETH_PER_CORPSE):
            manager.attempt_extraction(practitioner, corpse_entity.id)

        injuries = InjuryManager(db_session, game_session)
        assert injuries.get_body_state(player_entity.id) == BodyState()
        assert db_session.query(BodyInjury).count() == 0
        assert ProgressionManager(db_session, game_session).get_experience(
            player_entity.id, DENTAL_SKILL
        ) == 30

    def test_existing_wounds_untouched_by_practice(
        self,
        db_session: Session,
        game_session: GameSession,
        player_entity: Entity,
        corpse_entity: Entity,
        practitioner: EntityActor,
    ):
        """Verify failed and rejected practice leave an injured body as it was."""
        create_body_injury(
            db_session,
            game_session,
            player_entity,
            current_pain_level=35,
            is_bleeding=True,
        )
        injuries = InjuryManager(db_session, game_session)
        before = injuries.get_body_state(player_entity.id)
        manager = PracticeManager(db_session, game_session, rng=ALWAYS_FAIL)

        for _ in range(MAX_TEETH_PER_CORPSE):
            manager.attempt_extraction(practitioner, corpse_entity.id)
        assert injuries.get_body_state(player_entity.id) == before

        assert manager.attempt_extraction(practitioner, corpse_entity.id) is None
        assert injuries.get_body_state(player_entity.id) == before
        assert before.pain == 35
        assert before.is_bleeding is True
