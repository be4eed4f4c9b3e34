"""
WorkflowStep model - ordered steps of a transaction's workflow.

Usage:
    steps = await session.execute(
        select(WorkflowStepModel)
        .where(WorkflowStepModel.transaction_id == transaction_id)
        .order_by(WorkflowStepModel.step_order)
    )
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin

WORKFLOW_TYPES = ("bike_sales", "repair_process", "order_fulfillment", "custom_workflow")


class WorkflowStepModel(Base, TimestampMixin):
    """
    One step of a workflow attached to a transaction.

    Attributes:
        step_id: Unique identifier.
        transaction_id: FK to Transactions.transaction_id.
        workflow_type: Workflow the step belongs to.
        step_name: Display name ("BikeSpec", "Build", ...).
        step_order: 1-based position inside the workflow.
        is_completed: Completion flag.
        created_by: User that seeded the step.
        completed_by: User that completed the step.
        completed_at: Set when is_completed becomes true.
    """

    __tablename__ = "WorkflowSteps"

    step_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique workflow step identifier",
    )

    transaction_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("Transactions.transaction_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
        comment="Transaction this step belongs to",
    )

    workflow_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="bike_sales, repair_process, order_fulfillment or custom_workflow",
    )

    step_name: Mapped[str] = mapped_column(String(100), nullable=False)

    step_order: Mapped[int] = mapped_column(Integer, nullable=False, comment="1-based position in the workflow")

    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_by: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("Users.user_id", onupdate="CASCADE"),
        nullable=False,
    )

    completed_by: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("Users.user_id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
    )

    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "transaction_id",
            "workflow_type",
            "step_order",
            name="uq_workflow_steps_transaction_type_order",
        ),
        CheckConstraint("step_order > 0", name="ck_workflow_steps_step_order_positive"),
        CheckConstraint(
            "workflow_type IN ('bike_sales', 'repair_process', 'order_fulfillment', 'custom_workflow')",
            name="ck_workflow_steps_workflow_type_valid",
        ),
        Index("idx_workflow_steps_transaction_type", "transaction_id", "workflow_type"),
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_id": str(self.step_id),
            "transaction_id": str(self.transaction_id),
            "workflow_type": self.workflow_type,
            "step_name": self.step_name,
            "step_order": self.step_order,
            "is_completed": self.is_completed,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }

    def __repr__(self) -> str:
        return (
            f"<WorkflowStepModel(step_id={self.step_id}, type='{self.workflow_type}', "
            f"order={self.step_order}, name='{self.step_name}')>"
        )
