"""
Contract Validation Module

Модуль для валидации JSON контрактов split-правила:
проекции транзакции и deployment-конфигурации.
"""

from .validators import (
    ContractValidator,
    SplitConfigValidator,
    TransactionViewValidator,
    ValidationError,
    load_schema,
    validate_split_config,
    validate_transaction_view,
)

__all__ = [
    # Classes
    "ContractValidator",
    "TransactionViewValidator",
    "SplitConfigValidator",
    "ValidationError",
    # Functions
    "load_schema",
    "validate_transaction_view",
    "validate_split_config",
]
