"""
Bounded contexts: workflow (step tracking) and transactions (ledger and summary).
"""
