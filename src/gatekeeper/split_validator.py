"""
SplitValidator — Точки входа split-правила для hosting ledger

Три независимые точки входа, каждая принимает TransactionView
(плюс свой payload) и возвращает Verdict:
- spend(output_ref, view)     → GATE SPEND (delegation presence check)
- withdraw(view)              → GATE WITHDRAW (split enforcer, core)
- publish(certificate, view)  → GATE PUBLISH (certificate authorization)

Состояния между вызовами нет: каждый вызов является чистой функцией
от view и фиксированной SplitConfig.
"""

from typing import Union

from src.core.domain.split_config import SplitConfig
from src.core.domain.transaction import Certificate, OutputReference, TransactionView
from src.core.domain.verdict import EntryPoint, Verdict
from src.core.logging_setup import get_logger
from src.gatekeeper.gates.gate_publish_certificate import CertificateResult, GatePublishCertificate
from src.gatekeeper.gates.gate_spend_delegation import DelegationResult, GateSpendDelegation
from src.gatekeeper.gates.gate_withdraw_split import GateWithdrawSplit, SplitEnforcerResult

_logger = get_logger("gatekeeper.split_validator")

GateResult = Union[DelegationResult, SplitEnforcerResult, CertificateResult]


class SplitValidator:
    """
    Фасад над тремя gates с общей SplitConfig.

    Gates строятся один раз в __init__ и не хранят состояния, поэтому
    один экземпляр можно использовать для любого числа транзакций,
    в том числе параллельно.
    """

    def __init__(self, config: SplitConfig):
        self.config = config
        self.gate_spend = GateSpendDelegation(config.check_id)
        self.gate_withdraw = GateWithdrawSplit(config)
        self.gate_publish = GatePublishCertificate(config.owner_one, config.owner_two)

    def spend(self, output_ref: OutputReference, view: TransactionView) -> Verdict:
        """Проверка расхода одного input: делегирование в withdraw."""
        result = self.gate_spend.evaluate(view, output_ref=output_ref)
        return self._verdict(EntryPoint.SPEND, result)

    def withdraw(self, view: TransactionView) -> Verdict:
        """Основная проверка распределения."""
        result = self.gate_withdraw.evaluate(view)
        return self._verdict(EntryPoint.WITHDRAW, result)

    def publish(self, certificate: Certificate, view: TransactionView) -> Verdict:
        """Проверка авторизации stake certificate."""
        result = self.gate_publish.evaluate(view, certificate=certificate)
        return self._verdict(EntryPoint.PUBLISH, result)

    def _verdict(self, entry_point: EntryPoint, result: GateResult) -> Verdict:
        if not result.accepted:
            _logger.info(
                "%s rejected: %s (%s)",
                entry_point.value,
                result.reject_reason.value,
                result.details,
            )
        return Verdict(
            entry_point=entry_point,
            accepted=result.accepted,
            reason=result.reject_reason,
            details=result.details,
        )
