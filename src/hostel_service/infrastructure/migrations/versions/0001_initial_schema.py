"""Initial schema: hostels, rooms, hostel_students

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "hostels",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        sa.Column("gender", sa.String(length=20), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_hostels"),
        sa.UniqueConstraint("name", name="uq_hostels_name"),
    )

    op.create_table(
        "rooms",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("hostel_id", sa.Uuid(), nullable=False),
        sa.Column("room_number", sa.String(length=50), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("floor", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["hostel_id"], ["hostels.id"], name="fk_rooms_hostel_id_hostels", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id", name="pk_rooms"),
        sa.UniqueConstraint("hostel_id", "room_number", name="uq_rooms_hostel_id_room_number"),
    )
    op.create_index("ix_rooms_hostel_id", "rooms", ["hostel_id"])

    op.create_table(
        "hostel_students",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("hostel_id", sa.Uuid(), nullable=False),
        sa.Column("room_id", sa.Uuid(), nullable=False),
        sa.Column("student_id", sa.String(length=100), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("allocated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("vacated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["hostel_id"], ["hostels.id"], name="fk_hostel_students_hostel_id_hostels", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["room_id"], ["rooms.id"], name="fk_hostel_students_room_id_rooms", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id", name="pk_hostel_students"),
    )
    op.create_index("ix_hostel_students_hostel_id", "hostel_students", ["hostel_id"])
    op.create_index("ix_hostel_students_room_id", "hostel_students", ["room_id"])
    op.create_index("ix_hostel_students_student_id", "hostel_students", ["student_id"])


def downgrade() -> None:
    op.drop_index("ix_hostel_students_student_id", table_name="hostel_students")
    op.drop_index("ix_hostel_students_room_id", table_name="hostel_students")
    op.drop_index("ix_hostel_students_hostel_id", table_name="hostel_students")
    op.drop_table("hostel_students")
    op.drop_index("ix_rooms_hostel_id", table_name="rooms")
    op.drop_table("rooms")
    op.drop_table("hostels")
