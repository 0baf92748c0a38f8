"""initial schema: condominiums and the rows the executive dashboard reads

Revision ID: 001
Revises:
Create Date: 2026-10-19

All tenant-owned tables carry a nullable, indexed condominium_id.
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_TENANT_TABLES = (
    "financial_transactions",
    "budgets",
    "contracts",
    "insurance_policies",
    "governance_decisions",
    "meeting_minutes",
    "legal_checklist_items",
    "maintenance_requests",
    "equipment",
    "suppliers",
    "documents",
    "announcements",
)


def _id() -> sa.Column:
    return sa.Column("id", sa.String(36), primary_key=True)


def _tenant() -> sa.Column:
    return sa.Column("condominium_id", sa.String(36), nullable=True)


def _ts(name: str, nullable: bool = True) -> sa.Column:
    if nullable:
        return sa.Column(name, sa.DateTime(timezone=True), nullable=True)
    return sa.Column(
        name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
    )


def upgrade() -> None:
    op.create_table(
        "condominiums",
        _id(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("city", sa.Text(), nullable=True),
        sa.Column("state", sa.Text(), nullable=True),
        sa.Column("total_units", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        _ts("created_at", nullable=False),
    )
    op.create_table(
        "financial_transactions",
        _id(),
        _tenant(),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("status", sa.String(16), server_default="pendente", nullable=False),
        sa.Column("amount", sa.Float(), server_default="0", nullable=False),
        _ts("date"),
        _ts("due_date"),
        _ts("created_at", nullable=False),
    )
    op.create_table(
        "budgets",
        _id(),
        _tenant(),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("period", sa.String(16), nullable=True),
        sa.Column("planned_amount", sa.Float(), server_default="0", nullable=False),
        sa.Column("spent_amount", sa.Float(), server_default="0", nullable=False),
    )
    op.create_table(
        "contracts",
        _id(),
        _tenant(),
        sa.Column("supplier_id", sa.String(36), nullable=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("status", sa.String(16), server_default="ativo", nullable=False),
        sa.Column("monthly_value", sa.Float(), nullable=True),
        _ts("start_date"),
        _ts("end_date"),
    )
    op.create_table(
        "insurance_policies",
        _id(),
        _tenant(),
        sa.Column("insurer", sa.Text(), nullable=False),
        sa.Column("policy_number", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), server_default="ativo", nullable=False),
        sa.Column("coverage_amount", sa.Float(), server_default="0", nullable=False),
        _ts("start_date"),
        _ts("end_date"),
    )
    op.create_table(
        "governance_decisions",
        _id(),
        _tenant(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("decision_type", sa.String(32), server_default="assembleia", nullable=False),
        sa.Column("status", sa.String(16), server_default="pendente", nullable=False),
        _ts("decision_date"),
        sa.Column("votes_for", sa.Integer(), nullable=True),
        sa.Column("votes_against", sa.Integer(), nullable=True),
        sa.Column("votes_abstain", sa.Integer(), nullable=True),
    )
    op.create_table(
        "meeting_minutes",
        _id(),
        _tenant(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("meeting_type", sa.String(32), server_default="assembleia", nullable=False),
        sa.Column("status", sa.String(16), server_default="rascunho", nullable=False),
        _ts("meeting_date"),
        sa.Column("attendees_count", sa.Integer(), nullable=True),
        sa.Column("quorum_reached", sa.Boolean(), server_default=sa.false(), nullable=False),
    )
    op.create_table(
        "legal_checklist_items",
        _id(),
        _tenant(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("item_type", sa.String(32), server_default="documento", nullable=False),
        sa.Column("is_mandatory", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("frequency", sa.String(16), server_default="anual", nullable=False),
        sa.Column("status", sa.String(16), server_default="pendente", nullable=False),
        _ts("last_completed_date"),
        _ts("next_due_date"),
    )
    op.create_table(
        "maintenance_requests",
        _id(),
        _tenant(),
        sa.Column("equipment_id", sa.String(36), nullable=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("status", sa.String(16), server_default="aberto", nullable=False),
        sa.Column("priority", sa.String(16), server_default="normal", nullable=False),
        _ts("created_at", nullable=False),
        _ts("completed_at"),
    )
    op.create_table(
        "equipment",
        _id(),
        _tenant(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("location", sa.Text(), server_default="", nullable=False),
        sa.Column("status", sa.String(16), server_default="operacional", nullable=False),
    )
    op.create_table(
        "suppliers",
        _id(),
        _tenant(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("phone", sa.Text(), nullable=True),
        sa.Column("email", sa.Text(), nullable=True),
    )
    op.create_table(
        "documents",
        _id(),
        _tenant(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("type", sa.String(32), server_default="Outros", nullable=False),
        sa.Column("file_url", sa.Text(), nullable=True),
        _ts("expiration_date"),
        _ts("created_at", nullable=False),
    )
    op.create_table(
        "announcements",
        _id(),
        _tenant(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), server_default="", nullable=False),
        sa.Column("priority", sa.String(16), server_default="normal", nullable=False),
        _ts("created_at", nullable=False),
        _ts("expires_at"),
    )
    for table in _TENANT_TABLES:
        op.create_index(f"ix_{table}_condominium_id", table, ["condominium_id"])


def downgrade() -> None:
    for table in reversed(_TENANT_TABLES):
        op.drop_index(f"ix_{table}_condominium_id", table_name=table)
        op.drop_table(table, if_exists=True)
    op.drop_table("condominiums", if_exists=True)
