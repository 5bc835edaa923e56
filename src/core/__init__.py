"""
Core domain models, exact arithmetic, and contracts.

This module contains the foundational building blocks that are independent
of the hosting ledger (transaction views, split configuration, verdicts).
"""
