"""
Exact Rational — Точная дробная арифметика для split-границ

Модуль обеспечивает детерминированные вычисления долей:
- Процент как точная дробь percent / PERCENT_SCALE (fractions.Fraction)
- Дополнение 1 - p без потери точности
- Floor (round toward -inf) произведения total * p

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float никогда не участвует в вычислениях (ни на входе, ни в промежуточных значениях)
2. Знаменатель всегда > 0 (гарантируется Fraction)
3. Floor округляет к -inf, в том числе для отрицательного total
4. Все операции детерминированы и воспроизводимы

ФОРМУЛЫ:
    p = percent / 10000
    share_one = floor(total * p)
    share_two = floor(total * (1 - p))

    Внимание: share_one + share_two может быть меньше total на 1
    (оба слагаемых округлены вниз). Остаток от округления никогда
    не достаётся подписавшему бенефициару.
"""

import math
from fractions import Fraction
from typing import Final, NamedTuple

from src.core.domain.units import PERCENT_SCALE


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ONE: Final[Fraction] = Fraction(1)


# =============================================================================
# ДРОБИ
# =============================================================================


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def percent_fraction(percent: int) -> Fraction:
    """
    Процент в виде точной дроби percent / PERCENT_SCALE.

    Диапазон percent здесь не проверяется: это precondition
    конфигурации (SplitConfig), а не арифметики.

    Examples:
        >>> percent_fraction(5000)
        Fraction(1, 2)
        >>> percent_fraction(1234)
        Fraction(617, 5000)
    """
    _require_int(percent, "percent")
    return Fraction(percent, PERCENT_SCALE)


def complement(fraction: Fraction) -> Fraction:
    """
    Дополнение доли: 1 - p.

    Examples:
        >>> complement(Fraction(1, 4))
        Fraction(3, 4)
    """
    if not isinstance(fraction, Fraction):
        raise ValueError(f"fraction must be a Fraction, got {type(fraction).__name__}")
    return ONE - fraction


def floor_share(total: int, fraction: Fraction) -> int:
    """
    Floor от total * fraction (округление к -inf).

    Args:
        total: Целая сумма (может быть отрицательной или нулевой)
        fraction: Доля как Fraction

    Returns:
        floor(total * fraction) как int

    Examples:
        >>> floor_share(1_000_000, Fraction(1234, 10000))
        123400
        >>> floor_share(7, Fraction(1, 2))
        3
        >>> floor_share(-7, Fraction(1, 2))
        -4
    """
    _require_int(total, "total")
    if not isinstance(fraction, Fraction):
        raise ValueError(f"fraction must be a Fraction, got {type(fraction).__name__}")

    return math.floor(total * fraction)


# =============================================================================
# SPLIT BOUNDS
# =============================================================================


class SplitBounds(NamedTuple):
    """Floor-границы долей двух бенефициаров для заданного total."""

    total: int
    share_one: int  # floor(total * p)
    share_two: int  # floor(total * (1 - p))


def split_bounds(total: int, percent: int) -> SplitBounds:
    """
    Расчёт обеих floor-границ для total и percent.

    Examples:
        >>> split_bounds(10_000_000, 5000)
        SplitBounds(total=10000000, share_one=5000000, share_two=5000000)
        >>> split_bounds(0, 1234)
        SplitBounds(total=0, share_one=0, share_two=0)
    """
    p = percent_fraction(percent)
    return SplitBounds(
        total=total,
        share_one=floor_share(total, p),
        share_two=floor_share(total, complement(p)),
    )
