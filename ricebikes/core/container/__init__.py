"""
Dependency Injection Container.

Composes the domain containers and exposes a process-wide instance.
"""

from __future__ import annotations

import logging

from ricebikes.config.settings import Settings
from ricebikes.domains.transactions.application import TransactionsService, TransactionSummaryService
from ricebikes.domains.workflow.application import WorkflowInitializer, WorkflowStepsService

from .base import BaseContainer
from .transactions import TransactionsContainer
from .workflow import WorkflowContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Delegates to the domain containers; built once per process.
    """

    def __init__(self, settings: Settings | None = None):
        self._base = BaseContainer(settings)
        self._workflow = WorkflowContainer(self._base)
        self._transactions = TransactionsContainer(self._base)

        logger.info("DependencyContainer initialized with all domain containers")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    # ==================== WORKFLOW ====================

    def create_workflow_initializer(self, db) -> WorkflowInitializer:
        return self._workflow.create_workflow_initializer(db)

    def create_workflow_steps_service(self, db) -> WorkflowStepsService:
        return self._workflow.create_workflow_steps_service(db)

    # ==================== TRANSACTIONS ====================

    def create_transactions_service(self, db) -> TransactionsService:
        return self._transactions.create_transactions_service(db)

    def create_summary_service(self, db) -> TransactionSummaryService:
        return self._transactions.create_summary_service(db)


# ============================================================
# GLOBAL CONTAINER INSTANCE
# ============================================================

_container: DependencyContainer | None = None


def get_container(settings: Settings | None = None) -> DependencyContainer:
    """
    Get global container instance (singleton).

    Args:
        settings: Optional settings (only used on first call)
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer(settings)
    elif settings is not None:
        logger.warning(
            "Container already initialized, ignoring new settings. "
            "Call reset_container() first to change settings."
        )

    return _container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global DependencyContainer")
    _container = None


__all__ = [
    "DependencyContainer",
    "get_container",
    "reset_container",
    "BaseContainer",
    "WorkflowContainer",
    "TransactionsContainer",
]
