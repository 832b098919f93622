"""Initial schema: plans, workouts, sets, set_exercises, exercises, exercise_muscles, muscles, muscle_categories.

Parent references are indexed columns without FOREIGN KEY constraints:
existence is checked by the API and deletes never cascade.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "plans",
        sa.Column("plan_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("plan_id"),
    )

    op.create_table(
        "workouts",
        sa.Column("workout_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("plan_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("workout_id"),
    )
    op.create_index("ix_workouts_plan_id", "workouts", ["plan_id"], unique=False)

    op.create_table(
        "sets",
        sa.Column("set_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("set_id"),
    )
    op.create_index("ix_sets_workout_id", "sets", ["workout_id"], unique=False)

    op.create_table(
        "exercises",
        sa.Column("exercise_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("image_url", sa.String(length=1000), nullable=True),
        sa.PrimaryKeyConstraint("exercise_id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)

    op.create_table(
        "set_exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("set_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("exercise_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("duration", sa.String(length=50), nullable=True),
        sa.Column("unit", sa.String(length=20), nullable=True),
        sa.Column("count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_set_exercises_set_id", "set_exercises", ["set_id"], unique=False)
    op.create_index("ix_set_exercises_exercise_id", "set_exercises", ["exercise_id"], unique=False)

    op.create_table(
        "muscle_categories",
        sa.Column("muscle_category_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("muscle_category_id"),
    )
    op.create_index(op.f("ix_muscle_categories_name"), "muscle_categories", ["name"], unique=True)

    op.create_table(
        "muscles",
        sa.Column("muscle_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("muscle_category_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("muscle_id"),
    )
    op.create_index("ix_muscles_muscle_category_id", "muscles", ["muscle_category_id"], unique=False)

    op.create_table(
        "exercise_muscles",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("exercise_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("muscle_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_exercise_muscles_exercise_id", "exercise_muscles", ["exercise_id"], unique=False)
    op.create_index("ix_exercise_muscles_muscle_id", "exercise_muscles", ["muscle_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_exercise_muscles_muscle_id", table_name="exercise_muscles")
    op.drop_index("ix_exercise_muscles_exercise_id", table_name="exercise_muscles")
    op.drop_table("exercise_muscles")
    op.drop_index("ix_muscles_muscle_category_id", table_name="muscles")
    op.drop_table("muscles")
    op.drop_index(op.f("ix_muscle_categories_name"), table_name="muscle_categories")
    op.drop_table("muscle_categories")
    op.drop_index("ix_set_exercises_exercise_id", table_name="set_exercises")
    op.drop_index("ix_set_exercises_set_id", table_name="set_exercises")
    op.drop_table("set_exercises")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_sets_workout_id", table_name="sets")
    op.drop_table("sets")
    op.drop_index("ix_workouts_plan_id", table_name="workouts")
    op.drop_table("workouts")
    op.drop_table("plans")
