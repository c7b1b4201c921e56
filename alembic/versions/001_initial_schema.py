"""Initial schema: muscle groups, exercises, schedule, sessions, set rows.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.core.constants import DEFAULT_MUSCLE_GROUPS


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    muscle_groups = op.create_table(
        "muscle_groups",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_muscle_groups")),
    )
    op.create_index(op.f("ix_muscle_groups_name"), "muscle_groups", ["name"], unique=True)

    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("user_id", sa.Uuid, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("hidden", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("description", sa.String(length=300), nullable=True),
        sa.Column("external_link", sa.String(length=150), nullable=True),
        sa.Column("external_link_name", sa.String(length=100), nullable=True),
        sa.Column("rest_time_seconds", sa.Integer(), server_default="90", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("rest_time_seconds >= 0", name=op.f("ck_exercises_rest_time_non_negative")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
        sa.UniqueConstraint("user_id", "name", name="uq_exercises_user_id_name"),
    )
    op.create_index(op.f("ix_exercises_user_id"), "exercises", ["user_id"], unique=False)

    op.create_table(
        "exercise_muscle_groups",
        sa.Column("exercise_id", sa.Uuid, nullable=False),
        sa.Column("muscle_group_id", sa.Uuid, nullable=False),
        sa.ForeignKeyConstraint(
            ["exercise_id"], ["exercises.id"],
            name=op.f("fk_exercise_muscle_groups_exercise_id_exercises"), ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["muscle_group_id"], ["muscle_groups.id"],
            name=op.f("fk_exercise_muscle_groups_muscle_group_id_muscle_groups"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("exercise_id", "muscle_group_id", name=op.f("pk_exercise_muscle_groups")),
    )
    op.create_index(
        op.f("ix_exercise_muscle_groups_muscle_group_id"), "exercise_muscle_groups", ["muscle_group_id"], unique=False
    )

    op.create_table(
        "workout_schedule",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("user_id", sa.Uuid, nullable=False),
        sa.Column("muscle_group_id", sa.Uuid, nullable=True),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name=op.f("ck_workout_schedule_day_of_week_range")),
        sa.ForeignKeyConstraint(
            ["muscle_group_id"], ["muscle_groups.id"],
            name=op.f("fk_workout_schedule_muscle_group_id_muscle_groups"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_schedule")),
        sa.UniqueConstraint("user_id", "muscle_group_id", "day_of_week", name="uq_workout_schedule_user_group_day"),
    )
    op.create_index("ix_workout_schedule_user_day", "workout_schedule", ["user_id", "day_of_week"], unique=False)

    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("user_id", sa.Uuid, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_sessions")),
        sa.UniqueConstraint("user_id", "date", name="uq_workout_sessions_user_id_date"),
    )
    op.create_index("ix_workout_sessions_user_date", "workout_sessions", ["user_id", "date"], unique=False)

    op.create_table(
        "workout_exercises",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("session_id", sa.Uuid, nullable=False),
        sa.Column("exercise_id", sa.Uuid, nullable=False),
        sa.Column("weight", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("uses_individual_sets", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("total_weight", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("weight > 0 AND weight <= 2900", name=op.f("ck_workout_exercises_weight_range")),
        sa.CheckConstraint("reps > 0 AND reps <= 2900", name=op.f("ck_workout_exercises_reps_range")),
        sa.CheckConstraint("sets > 0 AND sets <= 2900", name=op.f("ck_workout_exercises_sets_range")),
        sa.ForeignKeyConstraint(
            ["exercise_id"], ["exercises.id"],
            name=op.f("fk_workout_exercises_exercise_id_exercises"), ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["session_id"], ["workout_sessions.id"],
            name=op.f("fk_workout_exercises_session_id_workout_sessions"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_exercises")),
    )
    op.create_index("ix_workout_exercises_session_id", "workout_exercises", ["session_id"], unique=False)
    op.create_index("ix_workout_exercises_exercise_id", "workout_exercises", ["exercise_id"], unique=False)

    op.create_table(
        "workout_exercise_sets",
        sa.Column("id", sa.Uuid, nullable=False),
        sa.Column("workout_exercise_id", sa.Uuid, nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.CheckConstraint("weight > 0 AND weight <= 2900", name=op.f("ck_workout_exercise_sets_weight_range")),
        sa.CheckConstraint("reps > 0 AND reps <= 2900", name=op.f("ck_workout_exercise_sets_reps_range")),
        sa.CheckConstraint("set_number >= 1", name=op.f("ck_workout_exercise_sets_set_number_positive")),
        sa.ForeignKeyConstraint(
            ["workout_exercise_id"], ["workout_exercises.id"],
            name=op.f("fk_workout_exercise_sets_workout_exercise_id_workout_exercises"), ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_exercise_sets")),
        sa.UniqueConstraint("workout_exercise_id", "set_number", name="uq_workout_exercise_sets_number"),
    )
    op.create_index(
        op.f("ix_workout_exercise_sets_workout_exercise_id"), "workout_exercise_sets", ["workout_exercise_id"], unique=False
    )

    op.bulk_insert(muscle_groups, [{"id": uuid.uuid4(), "name": name} for name in DEFAULT_MUSCLE_GROUPS])


def downgrade() -> None:
    op.drop_index(op.f("ix_workout_exercise_sets_workout_exercise_id"), table_name="workout_exercise_sets")
    op.drop_table("workout_exercise_sets")
    op.drop_index("ix_workout_exercises_exercise_id", table_name="workout_exercises")
    op.drop_index("ix_workout_exercises_session_id", table_name="workout_exercises")
    op.drop_table("workout_exercises")
    op.drop_index("ix_workout_sessions_user_date", table_name="workout_sessions")
    op.drop_table("workout_sessions")
    op.drop_index("ix_workout_schedule_user_day", table_name="workout_schedule")
    op.drop_table("workout_schedule")
    op.drop_index(op.f("ix_exercise_muscle_groups_muscle_group_id"), table_name="exercise_muscle_groups")
    op.drop_table("exercise_muscle_groups")
    op.drop_index(op.f("ix_exercises_user_id"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index(op.f("ix_muscle_groups_name"), table_name="muscle_groups")
    op.drop_table("muscle_groups")
