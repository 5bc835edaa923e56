"""GATE SPEND: Delegated Gate — подтверждение присутствия основной проверки

Вызывается hosting ledger один раз на каждый расходуемый input правила.
Accounting здесь НЕ выполняется: gate только проверяет, что в той же
транзакции лежит companion-authorization marker (withdrawal под check_id),
а значит GATE WITHDRAW будет выполнен ровно один раз для всей транзакции.

Сумма marker не проверяется: все inputs/outputs уже учтены в GATE WITHDRAW.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.transaction import OutputReference, TransactionView
from src.core.domain.units import normalize_credential
from src.core.domain.verdict import RejectReason
from src.core.logging_setup import get_logger

_logger = get_logger("gatekeeper.spend_delegation")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DelegationResult:
    """Результат GATE SPEND."""

    accepted: bool
    reject_reason: Optional[RejectReason]

    # Расходуемый input (если известен вызывающей стороне)
    output_ref: Optional[OutputReference]
    check_id: str
    marker_amount: Optional[int]

    # Детали
    details: str


# =============================================================================
# GATE SPEND
# =============================================================================


class GateSpendDelegation:
    """GATE SPEND: presence check для companion withdrawal marker."""

    def __init__(self, check_id: str):
        """Инициализация GATE SPEND.

        Args:
            check_id: идентификатор основной проверки (ключ в withdrawals)
        """
        self.check_id = normalize_credential(check_id)

    def evaluate(
        self,
        view: TransactionView,
        output_ref: Optional[OutputReference] = None,
    ) -> DelegationResult:
        """Оценка GATE SPEND.

        Args:
            view: проекция транзакции
            output_ref: расходуемый input (только для диагностики)

        Returns:
            DelegationResult с решением о допуске
        """
        if not view.has_withdrawal(self.check_id):
            _logger.debug("companion check %s missing (input %s)", self.check_id, output_ref)
            return DelegationResult(
                accepted=False,
                reject_reason=RejectReason.MISSING_COMPANION_CHECK,
                output_ref=output_ref,
                check_id=self.check_id,
                marker_amount=None,
                details=f"no withdrawal marker for {self.check_id}",
            )

        marker_amount = view.withdrawals[self.check_id]
        return DelegationResult(
            accepted=True,
            reject_reason=None,
            output_ref=output_ref,
            check_id=self.check_id,
            marker_amount=marker_amount,
            details=f"PASS: withdrawal marker for {self.check_id} present (amount={marker_amount})",
        )


def check_delegation(view: TransactionView, check_id: str) -> DelegationResult:
    """Однократная проверка GATE SPEND без явного построения gate."""
    return GateSpendDelegation(check_id).evaluate(view)
