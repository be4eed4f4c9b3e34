from .entities import RETROSPEC_TYPE, Transaction, TransactionsSummary

__all__ = ["Transaction", "TransactionsSummary", "RETROSPEC_TYPE"]
