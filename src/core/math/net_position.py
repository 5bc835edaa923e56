"""
Net Position — Учёт чистой позиции бенефициара в транзакции

Для бенефициара B:
    received    = Σ outputs[i].value.amount,  где outputs[i].credential == B
    contributed = Σ inputs[j].value.amount,   где inputs[j].credential == B
    net         = received - contributed

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Суммируется только designated unit (value.amount), assets игнорируются
2. Каждый бенефициар считается независимо от одного и того же immutable view
3. net может быть отрицательным (бенефициар только оплачивает комиссию)
"""

from typing import NamedTuple

from src.core.domain.transaction import TransactionView
from src.core.domain.units import normalize_credential


def received_by(view: TransactionView, beneficiary: str) -> int:
    """Сумма outputs, адресованных beneficiary."""
    credential = normalize_credential(beneficiary)
    return sum(o.value.amount for o in view.outputs if o.credential == credential)


def contributed_by(view: TransactionView, beneficiary: str) -> int:
    """Сумма inputs, принадлежащих beneficiary."""
    credential = normalize_credential(beneficiary)
    return sum(i.value.amount for i in view.inputs if i.credential == credential)


def net_of(view: TransactionView, beneficiary: str) -> int:
    """
    Чистое изменение стоимости beneficiary в транзакции.

    Args:
        view: Проекция транзакции
        beneficiary: Payment credential бенефициара

    Returns:
        received - contributed (signed int)
    """
    return received_by(view, beneficiary) - contributed_by(view, beneficiary)


class NetPositions(NamedTuple):
    """Чистые позиции обоих бенефициаров и их сумма."""

    net_one: int
    net_two: int

    @property
    def total(self) -> int:
        return self.net_one + self.net_two


def net_positions(view: TransactionView, owner_one: str, owner_two: str) -> NetPositions:
    """Независимый расчёт net для owner_one и owner_two."""
    return NetPositions(
        net_one=net_of(view, owner_one),
        net_two=net_of(view, owner_two),
    )
