"""
Transactions Domain

The shop ledger and the dashboard summary computed over it.
"""
