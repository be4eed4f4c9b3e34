from .workflow_step_repository import SQLAlchemyWorkflowStepRepository, translate_integrity_error

__all__ = ["SQLAlchemyWorkflowStepRepository", "translate_integrity_error"]
