"""
Workflow progress calculation.

Pure functions over an ordered step list; nothing here touches storage.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from .entities import WorkflowStep


@dataclass(frozen=True)
class StepSummary:
    step_id: UUID | None
    step_name: str
    step_order: int
    is_completed: bool
    completed_at: datetime | None


@dataclass(frozen=True)
class WorkflowProgress:
    total_steps: int
    completed_steps: int
    progress_percentage: int
    current_step: WorkflowStep | None
    is_workflow_complete: bool
    steps_summary: list[StepSummary] = field(default_factory=list)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13)."""
    return math.floor(value + 0.5)


def calculate_progress(steps: list[WorkflowStep]) -> WorkflowProgress:
    """
    Derive progress figures from the steps of one workflow.

    Args:
        steps: Steps of a single (transaction, workflow type) pair, any order.

    Returns:
        WorkflowProgress with percentage, current step and per-step summary.
    """
    ordered = sorted(steps, key=lambda s: s.step_order)
    total = len(ordered)
    completed = sum(1 for s in ordered if s.is_completed)

    percentage = round_half_up(completed / total * 100) if total > 0 else 0
    current = next((s for s in ordered if not s.is_completed), None)

    return WorkflowProgress(
        total_steps=total,
        completed_steps=completed,
        progress_percentage=percentage,
        current_step=current,
        is_workflow_complete=total > 0 and completed == total,
        steps_summary=[
            StepSummary(
                step_id=s.step_id,
                step_name=s.step_name,
                step_order=s.step_order,
                is_completed=s.is_completed,
                completed_at=s.completed_at,
            )
            for s in ordered
        ],
    )
