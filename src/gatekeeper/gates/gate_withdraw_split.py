"""GATE WITHDRAW: Split Enforcer — проверка распределения выводимой стоимости

Основная проверка правила. Выполняется ровно один раз на транзакцию
(через withdraw entry point); spend-проверки на каждом input только
подтверждают её присутствие.

Порядок проверок (первое нарушение — итог):
1. Output restriction: все outputs адресованы owner_one или owner_two
   → иначе ThirdPartyPayout
2. Net computation: net_one, net_two, total = net_one + net_two
3. Authorization: подписал ровно один владелец
   → оба: AmbiguousSigner, никто: Unauthorized
4. p = percent / 10000 (Fraction)
5. Bound check (floor к -inf):
   * owner_one подписал: net_one <= floor(total*p) И net_two >= floor(total*(1-p))
   * owner_two подписал: net_two <= floor(total*(1-p)) И net_one >= floor(total*p)
   → иначе SplitViolation
6. PASS

Остаток от округления всегда остаётся на стороне не подписавшего:
подписавший ограничен сверху floor-долей, контрагент ограничен снизу.
Переплата контрагенту (net больше минимума) допускается.
total == 0 (нулевая транзакция) проходит: обе границы равны 0.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.split_config import SplitConfig
from src.core.domain.transaction import TransactionView
from src.core.domain.verdict import RejectReason
from src.core.logging_setup import get_logger
from src.core.math.exact_rational import SplitBounds, split_bounds
from src.core.math.net_position import NetPositions, net_positions

_logger = get_logger("gatekeeper.withdraw_split")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SplitEnforcerResult:
    """Результат GATE WITHDRAW."""

    accepted: bool
    reject_reason: Optional[RejectReason]

    # Кто выводит (credential подписавшего владельца), None если не определён
    withdrawer: Optional[str]

    # Accounting (None, если проверка остановилась до accounting)
    net_one: Optional[int]
    net_two: Optional[int]
    total: Optional[int]

    # Floor-границы (None, если проверка остановилась до bound check)
    bound_one: Optional[int]  # floor(total * p)
    bound_two: Optional[int]  # floor(total * (1 - p))

    # Детали
    details: str


# =============================================================================
# GATE WITHDRAW
# =============================================================================


class GateWithdrawSplit:
    """GATE WITHDRAW: Split Enforcer.

    Stateless: вся конфигурация фиксирована в SplitConfig, каждое
    evaluate() является чистой функцией от TransactionView.
    """

    def __init__(self, config: SplitConfig):
        """Инициализация GATE WITHDRAW.

        Args:
            config: фиксированная конфигурация split-правила
        """
        self.config = config

    def evaluate(self, view: TransactionView) -> SplitEnforcerResult:
        """Оценка GATE WITHDRAW: распределение между двумя владельцами.

        Args:
            view: проекция транзакции

        Returns:
            SplitEnforcerResult с решением о допуске
        """
        owner_one = self.config.owner_one
        owner_two = self.config.owner_two

        # 1. Output restriction
        for index, output in enumerate(view.outputs):
            if output.credential not in (owner_one, owner_two):
                return self._rejected(
                    RejectReason.THIRD_PARTY_PAYOUT,
                    details=f"output #{index} pays third party {output.credential}",
                )

        # 2. Net computation
        nets = net_positions(view, owner_one, owner_two)

        # 3. Authorization (XOR)
        signed_one = owner_one in view.signatories
        signed_two = owner_two in view.signatories

        if signed_one and signed_two:
            return self._rejected(
                RejectReason.AMBIGUOUS_SIGNER,
                details="both owners signed",
                nets=nets,
            )

        if not signed_one and not signed_two:
            return self._rejected(
                RejectReason.UNAUTHORIZED,
                details="neither owner signed",
                nets=nets,
            )

        # 4-5. Bound check
        bounds = split_bounds(nets.total, self.config.percent)

        if signed_one:
            withdrawer = owner_one
            within_bounds = nets.net_one <= bounds.share_one and nets.net_two >= bounds.share_two
            rule = (
                f"owner_one withdraws: net_one={nets.net_one} <= {bounds.share_one}, "
                f"net_two={nets.net_two} >= {bounds.share_two}"
            )
        else:
            withdrawer = owner_two
            within_bounds = nets.net_two <= bounds.share_two and nets.net_one >= bounds.share_one
            rule = (
                f"owner_two withdraws: net_two={nets.net_two} <= {bounds.share_two}, "
                f"net_one={nets.net_one} >= {bounds.share_one}"
            )

        if not within_bounds:
            return self._rejected(
                RejectReason.SPLIT_VIOLATION,
                details=f"violated {rule} (total={nets.total}, percent={self.config.percent})",
                nets=nets,
                bounds=bounds,
                withdrawer=withdrawer,
            )

        # 6. PASS
        _logger.debug("split accepted: %s", rule)
        return SplitEnforcerResult(
            accepted=True,
            reject_reason=None,
            withdrawer=withdrawer,
            net_one=nets.net_one,
            net_two=nets.net_two,
            total=nets.total,
            bound_one=bounds.share_one,
            bound_two=bounds.share_two,
            details=f"PASS: {rule}",
        )

    def _rejected(
        self,
        reason: RejectReason,
        details: str,
        nets: Optional[NetPositions] = None,
        bounds: Optional[SplitBounds] = None,
        withdrawer: Optional[str] = None,
    ) -> SplitEnforcerResult:
        """Создание rejected result с доступной на момент отказа диагностикой."""
        _logger.debug("split rejected (%s): %s", reason.value, details)
        return SplitEnforcerResult(
            accepted=False,
            reject_reason=reason,
            withdrawer=withdrawer,
            net_one=nets.net_one if nets is not None else None,
            net_two=nets.net_two if nets is not None else None,
            total=nets.total if nets is not None else None,
            bound_one=bounds.share_one if bounds is not None else None,
            bound_two=bounds.share_two if bounds is not None else None,
            details=details,
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def enforce(
    view: TransactionView,
    owner_one: str,
    owner_two: str,
    percent: int,
    check_id: Optional[str] = None,
) -> SplitEnforcerResult:
    """
    Однократная проверка split без явного построения gate.

    check_id не участвует в решении; по умолчанию используется owner_one.

    Raises:
        pydantic.ValidationError: Если параметры не образуют валидную SplitConfig
    """
    config = SplitConfig(
        owner_one=owner_one,
        owner_two=owner_two,
        percent=percent,
        check_id=check_id or owner_one,
    )
    return GateWithdrawSplit(config).evaluate(view)
