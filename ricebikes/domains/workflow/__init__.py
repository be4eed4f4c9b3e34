"""
Workflow Domain

Ordered per-transaction step tracking: seeding, completion, reset and progress.
"""
