"""Initial schema: users, customers, transactions and workflow steps

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-09-02

Creates:
- Users
- Customers
- Transactions (serial transaction_num, unique transaction_id)
- WorkflowSteps with the (transaction_id, workflow_type, step_order) unique
  constraint and the step_order / workflow_type check constraints
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    # =========================================================================
    # Users / Customers
    # =========================================================================
    op.create_table(
        "Users",
        sa.Column("user_id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("firstname", sa.String(), nullable=False),
        sa.Column("lastname", sa.String(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("username", sa.String(), nullable=False, unique=True),
    )

    op.create_table(
        "Customers",
        sa.Column("customer_id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.CHAR(10), nullable=True),
    )

    # =========================================================================
    # Transactions
    # =========================================================================
    op.create_table(
        "Transactions",
        sa.Column("transaction_num", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "transaction_id",
            UUID(as_uuid=True),
            nullable=False,
            unique=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("date_created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("transaction_type", sa.String(), nullable=False),
        sa.Column(
            "customer_id",
            UUID(as_uuid=True),
            sa.ForeignKey("Customers.customer_id"),
            nullable=False,
        ),
        sa.Column("total_cost", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_paid", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_refurb", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_urgent", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_nuclear", sa.Boolean(), nullable=True),
        sa.Column("is_beer_bike", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_employee", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_reserved", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_waiting_on_email", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("date_completed", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_Transactions_customer_id", "Transactions", ["customer_id"])

    # =========================================================================
    # WorkflowSteps
    # =========================================================================
    op.create_table(
        "WorkflowSteps",
        sa.Column(
            "step_id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
            comment="Unique workflow step identifier",
        ),
        sa.Column(
            "transaction_id",
            UUID(as_uuid=True),
            sa.ForeignKey("Transactions.transaction_id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
            comment="Transaction this step belongs to",
        ),
        sa.Column(
            "workflow_type",
            sa.String(50),
            nullable=False,
            comment="bike_sales, repair_process, order_fulfillment or custom_workflow",
        ),
        sa.Column("step_name", sa.String(100), nullable=False),
        sa.Column("step_order", sa.Integer(), nullable=False, comment="1-based position in the workflow"),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column(
            "created_by",
            UUID(as_uuid=True),
            sa.ForeignKey("Users.user_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "completed_by",
            UUID(as_uuid=True),
            sa.ForeignKey("Users.user_id", ondelete="SET NULL", onupdate="CASCADE"),
            nullable=True,
        ),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint(
            "transaction_id",
            "workflow_type",
            "step_order",
            name="uq_workflow_steps_transaction_type_order",
        ),
        sa.CheckConstraint("step_order > 0", name="ck_workflow_steps_step_order_positive"),
        sa.CheckConstraint(
            "workflow_type IN ('bike_sales', 'repair_process', 'order_fulfillment', 'custom_workflow')",
            name="ck_workflow_steps_workflow_type_valid",
        ),
    )
    op.create_index("ix_WorkflowSteps_transaction_id", "WorkflowSteps", ["transaction_id"])
    op.create_index("ix_WorkflowSteps_workflow_type", "WorkflowSteps", ["workflow_type"])
    op.create_index("idx_workflow_steps_transaction_type", "WorkflowSteps", ["transaction_id", "workflow_type"])


def downgrade() -> None:
    op.drop_index("idx_workflow_steps_transaction_type", table_name="WorkflowSteps")
    op.drop_index("ix_WorkflowSteps_workflow_type", table_name="WorkflowSteps")
    op.drop_index("ix_WorkflowSteps_transaction_id", table_name="WorkflowSteps")
    op.drop_table("WorkflowSteps")

    op.drop_index("ix_Transactions_customer_id", table_name="Transactions")
    op.drop_table("Transactions")

    op.drop_table("Customers")
    op.drop_table("Users")
