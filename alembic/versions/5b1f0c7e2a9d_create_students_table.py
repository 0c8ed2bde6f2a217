"""create students table

Revision ID: 5b1f0c7e2a9d
Revises:
Create Date: 2026-10-19 10:12:05.118204

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b1f0c7e2a9d"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


GENDERS = ("male", "female", "other")
BLOOD_GROUPS = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
STATUSES = ("active", "block")


def upgrade():
    op.create_table(
        "students",
        sa.Column("pk", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.JSON(), nullable=False),
        sa.Column("gender", sa.Enum(*GENDERS, name="gender_enum"), nullable=False),
        sa.Column("date_of_birth", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("contact_no", sa.Text(), nullable=False),
        sa.Column("emergency_contact_no", sa.Text(), nullable=False),
        sa.Column(
            "blood_group", sa.Enum(*BLOOD_GROUPS, name="blood_group_enum"), nullable=True
        ),
        sa.Column("present_address", sa.Text(), nullable=False),
        sa.Column("permanent_address", sa.Text(), nullable=False),
        sa.Column("guardian", sa.JSON(), nullable=False),
        sa.Column("local_guardian", sa.JSON(), nullable=False),
        sa.Column("profile_img", sa.Text(), nullable=True),
        sa.Column(
            "is_active",
            sa.Enum(*STATUSES, name="student_status_enum"),
            server_default="active",
            nullable=False,
        ),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index("ix_students_id", "students", ["id"], unique=True)


def downgrade():
    op.drop_index("ix_students_id", table_name="students")
    op.drop_table("students")
    bind = op.get_bind()
    for enum_name in ("student_status_enum", "blood_group_enum", "gender_enum"):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
