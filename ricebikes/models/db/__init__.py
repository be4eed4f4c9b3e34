"""
Database models. Importing this package registers every table on ``Base.metadata``.
"""

from .base import Base, TimestampMixin
from .customers import CustomerModel
from .transactions import TransactionModel
from .users import UserModel
from .workflow_steps import WORKFLOW_TYPES, WorkflowStepModel

__all__ = [
    "Base",
    "TimestampMixin",
    "CustomerModel",
    "TransactionModel",
    "UserModel",
    "WorkflowStepModel",
    "WORKFLOW_TYPES",
]
