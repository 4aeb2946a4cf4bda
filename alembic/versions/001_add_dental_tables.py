"""Add dental tables.

Revision ID: 001_dental
Revises:
Create Date: 2026-10-19

This migration creates:
- game_sessions, entities, entity_skills: characters and skill tracks
- teeth: the 32 tracked teeth of each character
- dental_profiles: numbing timer per character
- corpse_dental_records: practice counter per corpse
- items, body_injuries: reward inventory and wound state
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "001_dental"
down_revision = None
branch_labels = None
depends_on = None

TOOTH_STATES = ("healthy", "cavity", "infected", "broken", "extracted")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _entity_fk(**kwargs) -> sa.Column:
    return sa.Column(
        "entity_id",
        sa.Integer(),
        sa.ForeignKey("entities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        **kwargs,
    )


def _session_fk() -> sa.Column:
    return sa.Column(
        "session_id",
        sa.Integer(),
        sa.ForeignKey("game_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def upgrade() -> None:
    # === SESSIONS AND ENTITIES ===
    op.create_table(
        "game_sessions",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("session_name", sa.String(200), nullable=True),
        sa.Column("player_entity_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("total_turns", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "entities",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _session_fk(),
        sa.Column("entity_key", sa.String(100), nullable=False, index=True),
        sa.Column("display_name", sa.String(200), nullable=False),
        sa.Column(
            "entity_type",
            sa.Enum("player", "npc", "monster", "animal", name="entitytype"),
            nullable=False,
        ),
        sa.Column("is_alive", sa.Boolean(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("session_id", "entity_key", name="uq_entity_session_key"),
    )
    op.create_foreign_key(
        "fk_game_sessions_player_entity",
        "game_sessions",
        "entities",
        ["player_entity_id"],
        ["id"],
        ondelete="SET NULL",
    )
    op.create_table(
        "entity_skills",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _entity_fk(),
        sa.Column("skill_key", sa.String(100), nullable=False),
        sa.Column("proficiency_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("experience_points", sa.Integer(), nullable=False, server_default="0"),
        sa.UniqueConstraint("entity_id", "skill_key", name="uq_entity_skill"),
    )

    # === TEETH ===
    op.create_table(
        "teeth",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _entity_fk(),
        _session_fk(),
        sa.Column("tooth_index", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("position", sa.Enum("upper", "lower", name="jawposition"), nullable=False),
        sa.Column("side", sa.Enum("left", "right", name="jawside"), nullable=False),
        sa.Column("health", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("state", sa.Enum(*TOOTH_STATES, name="toothstate"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("entity_id", "tooth_index", name="uq_entity_tooth_index"),
        sa.CheckConstraint("tooth_index BETWEEN 1 AND 32", name="ck_tooth_index_range"),
        sa.CheckConstraint("health BETWEEN 0 AND 100", name="ck_tooth_health_range"),
    )

    # === NUMBING AND PRACTICE ===
    op.create_table(
        "dental_profiles",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _entity_fk(unique=True),
        _session_fk(),
        sa.Column("anesthetic_turns", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint("anesthetic_turns >= 0", name="ck_anesthetic_turns_positive"),
    )
    op.create_table(
        "corpse_dental_records",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _entity_fk(unique=True),
        _session_fk(),
        sa.Column("teeth_extracted", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint("teeth_extracted >= 0", name="ck_teeth_extracted_positive"),
    )

    # === REWARDS AND WOUNDS ===
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _session_fk(),
        sa.Column("item_key", sa.String(100), nullable=False, index=True),
        sa.Column("display_name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "item_type",
            sa.Enum("consumable", "tool", "misc", name="itemtype"),
            nullable=False,
        ),
        sa.Column(
            "holder_id",
            sa.Integer(),
            sa.ForeignKey("entities.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_stackable", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "body_injuries",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        _entity_fk(),
        _session_fk(),
        sa.Column("body_part", sa.Enum("head", "mouth", "jaw", name="bodypart"), nullable=False),
        sa.Column(
            "injury_type",
            sa.Enum("laceration", "fracture", "deep_wound", name="injurytype"),
            nullable=False,
        ),
        sa.Column(
            "severity",
            sa.Enum("minor", "moderate", "severe", "critical", name="injuryseverity"),
            nullable=False,
        ),
        sa.Column("caused_by", sa.Text(), nullable=False),
        sa.Column("occurred_turn", sa.Integer(), nullable=False, index=True),
        sa.Column("occurred_at", sa.DateTime(), nullable=False),
        sa.Column("current_pain_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_bleeding", sa.Boolean(), nullable=False),
        sa.Column("has_deep_wound", sa.Boolean(), nullable=False),
        sa.Column("is_healed", sa.Boolean(), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("body_injuries")
    op.drop_table("items")
    op.drop_table("corpse_dental_records")
    op.drop_table("dental_profiles")
    op.drop_table("teeth")
    op.drop_table("entity_skills")
    op.drop_constraint("fk_game_sessions_player_entity", "game_sessions", type_="foreignkey")
    op.drop_table("entities")
    op.drop_table("game_sessions")
