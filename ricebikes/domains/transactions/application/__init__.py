from .dto import TransactionDTO, TransactionsSummaryDTO
from .ports import ITransactionRepository, ITransactionSummaryRepository, ITransactionUpdateNotifier
from .summary_service import TransactionSummaryService
from .transactions_service import TransactionsService

__all__ = [
    "TransactionDTO",
    "TransactionsSummaryDTO",
    "ITransactionRepository",
    "ITransactionSummaryRepository",
    "ITransactionUpdateNotifier",
    "TransactionSummaryService",
    "TransactionsService",
]
