"""
Workflow Step Repository Implementation

SQLAlchemy implementation of IWorkflowStepRepository.
"""

import logging
import uuid
from uuid import UUID

from sqlalchemy import select
from sqlalchemy import update as sql_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ricebikes.core.domain import ConflictException, EntityNotFoundException, ValidationException
from ricebikes.domains.workflow.application.dto import WorkflowStepFilters
from ricebikes.domains.workflow.application.ports import IWorkflowStepRepository
from ricebikes.domains.workflow.domain.entities import WorkflowStep
from ricebikes.domains.workflow.domain.value_objects import WorkflowType
from ricebikes.models.db.base import utc_now
from ricebikes.models.db.workflow_steps import WorkflowStepModel

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def translate_integrity_error(error: IntegrityError) -> Exception:
    """Map a database integrity error to the matching domain exception."""
    sqlstate = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    if sqlstate == FOREIGN_KEY_VIOLATION:
        return ValidationException("Referenced transaction or user does not exist")
    if sqlstate == UNIQUE_VIOLATION or sqlstate is None:
        return ConflictException(
            "A workflow step with this order already exists for this transaction and workflow type",
            entity_type="WorkflowStep",
        )
    return error


class SQLAlchemyWorkflowStepRepository(IWorkflowStepRepository):
    """
    SQLAlchemy implementation of the workflow step repository.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find(self, filters: WorkflowStepFilters | None = None) -> list[WorkflowStep]:
        """Find steps matching every given filter."""
        query = select(WorkflowStepModel)

        if filters is not None:
            if filters.transaction_id is not None:
                query = query.where(WorkflowStepModel.transaction_id == filters.transaction_id)
            if filters.workflow_type is not None:
                query = query.where(WorkflowStepModel.workflow_type == filters.workflow_type.value)
            if filters.is_completed is not None:
                query = query.where(WorkflowStepModel.is_completed == filters.is_completed)
            if filters.step_order is not None:
                query = query.where(WorkflowStepModel.step_order == filters.step_order)

        query = query.order_by(WorkflowStepModel.step_order.asc(), WorkflowStepModel.created_at.asc())

        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_by_transaction_and_type(
        self,
        transaction_id: UUID,
        workflow_type: WorkflowType,
    ) -> list[WorkflowStep]:
        return await self.find(WorkflowStepFilters(transaction_id=transaction_id, workflow_type=workflow_type))

    async def find_by_id(self, step_id: UUID) -> WorkflowStep | None:
        model = await self._get_model(step_id)
        return self._to_entity(model) if model else None

    async def create(self, step: WorkflowStep) -> WorkflowStep:
        """
        Insert a single step.

        Raises:
            ValidationException: created_by is missing.
            ConflictException: step_order already taken for the workflow.
        """
        if not step.created_by:
            raise ValidationException("created_by user ID is required", field="created_by")

        model = self._to_model(step)
        self.session.add(model)
        await self._commit()
        await self.session.refresh(model)

        logger.debug(f"Created workflow step {model.step_id} ({model.workflow_type} #{model.step_order})")
        return self._to_entity(model)

    async def create_many(self, steps: list[WorkflowStep]) -> list[WorkflowStep]:
        """Insert a batch in a single commit; any failure rolls back the whole batch."""
        for step in steps:
            if not step.created_by:
                raise ValidationException("created_by user ID is required", field="created_by")

        models = [self._to_model(s) for s in steps]
        self.session.add_all(models)
        await self._commit()
        for model in models:
            await self.session.refresh(model)

        return [self._to_entity(m) for m in sorted(models, key=lambda m: m.step_order)]

    async def update(
        self,
        step_id: UUID,
        is_completed: bool | None = None,
        completed_by: UUID | None = None,
    ) -> WorkflowStep:
        model = await self._get_model(step_id)
        if model is None:
            raise EntityNotFoundException("WorkflowStep", step_id, "Workflow step not found")

        step = self._to_entity(model)
        if is_completed is True:
            step.complete(completed_by)
        elif is_completed is False:
            step.uncomplete()

        model.is_completed = step.is_completed
        model.completed_at = step.completed_at
        model.completed_by = step.completed_by
        model.updated_at = utc_now()

        await self._commit()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def delete(self, step_id: UUID) -> WorkflowStep | None:
        model = await self._get_model(step_id)
        if model is None:
            return None

        deleted = self._to_entity(model)
        await self.session.delete(model)
        await self._commit()
        return deleted

    async def reset_all(self, transaction_id: UUID, workflow_type: WorkflowType) -> list[WorkflowStep]:
        """Clear completion on every step of the workflow and return the ordered set."""
        await self.session.execute(
            sql_update(WorkflowStepModel)
            .where(
                WorkflowStepModel.transaction_id == transaction_id,
                WorkflowStepModel.workflow_type == workflow_type.value,
            )
            .values(
                is_completed=False,
                completed_at=None,
                completed_by=None,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session="fetch")
        )
        await self._commit()
        return await self.find_by_transaction_and_type(transaction_id, workflow_type)

    # -------------------------------------------------------------------------

    async def _get_model(self, step_id: UUID) -> WorkflowStepModel | None:
        result = await self.session.execute(select(WorkflowStepModel).where(WorkflowStepModel.step_id == step_id))
        return result.scalar_one_or_none()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise translate_integrity_error(e) from e
        except Exception:
            await self.session.rollback()
            raise

    def _to_entity(self, model: WorkflowStepModel) -> WorkflowStep:
        return WorkflowStep(
            step_id=model.step_id,
            transaction_id=model.transaction_id,
            workflow_type=WorkflowType(model.workflow_type),
            step_name=model.step_name,
            step_order=model.step_order,
            is_completed=model.is_completed,
            created_by=model.created_by,
            completed_by=model.completed_by,
            completed_at=model.completed_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, step: WorkflowStep) -> WorkflowStepModel:
        now = utc_now()
        return WorkflowStepModel(
            step_id=step.step_id or uuid.uuid4(),
            transaction_id=step.transaction_id,
            workflow_type=step.workflow_type.value,
            step_name=step.step_name,
            step_order=step.step_order,
            is_completed=step.is_completed,
            created_by=step.created_by,
            completed_by=step.completed_by,
            completed_at=step.completed_at,
            created_at=now,
            updated_at=now,
        )
