"""Tests for TreatmentManager cavity filling."""

import pytest
from sqlalchemy.orm import Session

from dentalcare.database.models.entities import Entity
from dentalcare.database.models.enums import ToothState
from dentalcare.database.models.session import GameSession
from dentalcare.managers.treatment import TreatmentManager
from dentalcare.rules.skills import DENTAL_SKILL
from tests.factories import StubActor


@pytest.fixture
def treatment(db_session: Session, game_session: GameSession) -> TreatmentManager:
    return TreatmentManager(db_session, game_session)


@pytest.fixture
def patient(treatment: TreatmentManager, player_entity: Entity) -> Entity:
    """Player with a cavity in tooth 4."""
    treatment.initialize(player_entity.id)
    treatment.set_tooth_state(player_entity.id, 4, ToothState.CAVITY)
    return player_entity


class TestFillCavity:
    """Tests for fill_cavity."""

    def test_skilled_actor_fills_cavity(
        self, treatment: TreatmentManager, patient: Entity
    ):
        """Verify a level 3 actor restores the tooth and gains experience."""
        actor = StubActor(dental=3)

        result = treatment.fill_cavity(actor, patient.id, 4)

        assert result is True
        assert treatment.get_tooth(patient.id, 4).state == ToothState.HEALTHY
        assert actor.experience == [(DENTAL_SKILL, 30)]

    def test_health_left_unchanged(self, treatment: TreatmentManager, patient: Entity):
        """Verify filling treats decay, not damage."""
        tooth = treatment.get_tooth(patient.id, 4)
        treatment._transition(tooth, state=ToothState.CAVITY, health=45)

        treatment.fill_cavity(StubActor(dental=3), patient.id, 4)

        assert treatment.get_tooth(patient.id, 4).health == 45

    def test_unskilled_actor_rejected(
        self, treatment: TreatmentManager, patient: Entity
    ):
        """Verify cavity filling needs level 3."""
        actor = StubActor(dental=2)

        assert treatment.fill_cavity(actor, patient.id, 4) is False
        assert treatment.get_tooth(patient.id, 4).state == ToothState.CAVITY
        assert actor.experience == []

    def test_none_actor_rejected(self, treatment: TreatmentManager, patient: Entity):
        """Verify an absent actor can't fill anything."""
        assert treatment.fill_cavity(None, patient.id, 4) is False

    @pytest.mark.parametrize("index", [5, 0, 33])
    def test_needs_a_cavity(
        self, treatment: TreatmentManager, patient: Entity, index
    ):
        """Verify healthy or invalid teeth can't be filled."""
        assert treatment.fill_cavity(StubActor(dental=5), patient.id, index) is False

    def test_extracted_tooth_cannot_be_filled(
        self, treatment: TreatmentManager, patient: Entity
    ):
        """Verify fillings don't bring back extracted teeth."""
        treatment.extract_tooth(patient.id, 4)

        assert treatment.fill_cavity(StubActor(dental=10), patient.id, 4) is False
        assert treatment.get_tooth(patient.id, 4).state == ToothState.EXTRACTED

    def test_actor_without_experience_track(
        self, treatment: TreatmentManager, patient: Entity
    ):
        """Verify actors that only report skill can still fill."""

        class SkillOnly:
            def get_skill_level(self, skill_key):
                return 4

        assert treatment.fill_cavity(SkillOnly(), patient.id, 4) is True
