"""Initial schema: users, clients and check-ins.

Revision ID: 001
Create Date: 2026-10-16
"""

from alembic import op
import sqlalchemy as sa


revision = "001"
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum("EMPLOYEE", "MANAGER", "ADMIN", name="userrole")


def upgrade() -> None:
    # ── users ─────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column("role", user_role, nullable=False, server_default="EMPLOYEE"),
        sa.Column("manager_id", sa.Integer, sa.ForeignKey("users.id"), nullable=True),
        sa.Column("api_token_hash", sa.String(64), unique=True, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_users_manager", "users", ["manager_id"])

    # ── clients ───────────────────────────────────────────────────────
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )

    # ── checkins ──────────────────────────────────────────────────────
    op.create_table(
        "checkins",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("employee_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("client_id", sa.Integer, sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("distance_from_client_km", sa.Float, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("checkin_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("checkout_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_checkins_employee_time", "checkins", ["employee_id", "checkin_time"]
    )
    op.create_index("idx_checkins_client", "checkins", ["client_id"])
    op.create_index(
        "uq_checkins_open_per_employee",
        "checkins",
        ["employee_id"],
        unique=True,
        postgresql_where=sa.text("checkout_time IS NULL"),
    )


def downgrade() -> None:
    op.drop_index("uq_checkins_open_per_employee", table_name="checkins")
    op.drop_index("idx_checkins_client", table_name="checkins")
    op.drop_index("idx_checkins_employee_time", table_name="checkins")
    op.drop_table("checkins")
    op.drop_table("clients")
    op.drop_index("idx_users_manager", table_name="users")
    op.drop_table("users")
    user_role.drop(op.get_bind(), checkfirst=True)
