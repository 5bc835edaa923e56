"""
Verdict — Решение split-правила по транзакции

Решение всегда терминальное: Accept или Reject с одной причиной.
Частичного успеха и повторов нет; при нескольких нарушениях
сообщается первое найденное.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class RejectReason(str, Enum):
    """Причина отказа"""

    THIRD_PARTY_PAYOUT = "ThirdPartyPayout"
    AMBIGUOUS_SIGNER = "AmbiguousSigner"
    UNAUTHORIZED = "Unauthorized"
    SPLIT_VIOLATION = "SplitViolation"
    MISSING_COMPANION_CHECK = "MissingCompanionCheck"


class EntryPoint(str, Enum):
    """Точка входа, через которую hosting ledger вызывает правило"""

    SPEND = "spend"
    WITHDRAW = "withdraw"
    PUBLISH = "publish"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TransactionRejected(Exception):
    """
    Транзакция отклонена split-правилом.

    Поднимается только через Verdict.raise_for_rejection(), когда hosting
    pipeline обрабатывает отказ как ошибку исполнения скрипта.
    """

    def __init__(self, reason: RejectReason, details: str = ""):
        self.reason = reason
        self.details = details
        message = reason.value if not details else f"{reason.value}: {details}"
        super().__init__(message)


# =============================================================================
# VERDICT
# =============================================================================


class Verdict(BaseModel):
    """
    Итог вызова точки входа.

    Инвариант: accepted ⇔ reason is None.
    """

    entry_point: EntryPoint = Field(..., description="Точка входа")
    accepted: bool = Field(..., description="Транзакция допускается")
    reason: Optional[RejectReason] = Field(None, description="Причина отказа")
    details: str = Field("", description="Диагностика решения")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_reason_consistency(self) -> "Verdict":
        if self.accepted and self.reason is not None:
            raise ValueError("accepted verdict cannot carry a reject reason")
        if not self.accepted and self.reason is None:
            raise ValueError("rejected verdict requires a reject reason")
        return self

    def raise_for_rejection(self) -> None:
        """
        Raises:
            TransactionRejected: Если транзакция отклонена
        """
        if not self.accepted:
            raise TransactionRejected(self.reason, self.details)
