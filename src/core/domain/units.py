"""
Units — Централизованный модуль идентификаторов и единиц стоимости

Единственный допустимый способ нормализации:
- credential (payment / stake credential, 28-байтовый hash в hex)
- output reference tx_id (32-байтовый hash в hex)
- amount (целое число минимальных единиц designated unit)

ЗАПРЕЩЕНО сравнивать credentials без нормализации из этого модуля:
"AB.." и "ab.." обязаны считаться одним и тем же бенефициаром.
"""

import re
from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Длина credential hash (payment key hash / script hash), байт
CREDENTIAL_HASH_BYTES: Final[int] = 28

# Длина transaction id, байт
TX_ID_BYTES: Final[int] = 32

# Знаменатель процентной доли: percent / PERCENT_SCALE = доля owner_one
PERCENT_SCALE: Final[int] = 10_000

_CREDENTIAL_RE: Final = re.compile(rf"^[0-9a-f]{{{CREDENTIAL_HASH_BYTES * 2}}}$")
_TX_ID_RE: Final = re.compile(rf"^[0-9a-f]{{{TX_ID_BYTES * 2}}}$")


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_credential(value: str) -> str:
    """
    Нормализация credential hash к каноническому виду (lowercase hex).

    Args:
        value: credential в hex (регистр не важен, допускается префикс 0x)

    Returns:
        Credential в lowercase hex длиной CREDENTIAL_HASH_BYTES * 2

    Raises:
        ValueError: Если значение не является hex нужной длины

    Examples:
        >>> normalize_credential("AB" * 28) == "ab" * 28
        True
    """
    if not isinstance(value, str):
        raise ValueError(f"Credential must be a hex string, got {type(value).__name__}")

    normalized = value.strip().lower()
    if normalized.startswith("0x"):
        normalized = normalized[2:]

    if not _CREDENTIAL_RE.match(normalized):
        raise ValueError(
            f"Credential must be {CREDENTIAL_HASH_BYTES} bytes of hex "
            f"({CREDENTIAL_HASH_BYTES * 2} chars), got {value!r}"
        )
    return normalized


def normalize_tx_id(value: str) -> str:
    """Нормализация transaction id (lowercase hex, TX_ID_BYTES байт)."""
    if not isinstance(value, str):
        raise ValueError(f"tx_id must be a hex string, got {type(value).__name__}")

    normalized = value.strip().lower()
    if not _TX_ID_RE.match(normalized):
        raise ValueError(f"tx_id must be {TX_ID_BYTES} bytes of hex, got {value!r}")
    return normalized


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_amount(amount: int, name: str = "amount") -> int:
    """
    Проверка, что сумма является неотрицательным целым.

    bool отвергается явно: True/False не являются суммами.

    Raises:
        ValueError: Если сумма не int или отрицательная
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"{name} must be an integer, got {amount!r}")

    if amount < 0:
        raise ValueError(f"{name} cannot be negative: {amount}")

    return amount


def validate_percent(percent: int) -> int:
    """
    Проверка процентного параметра split.

    percent / PERCENT_SCALE — доля owner_one, поэтому допустим только
    диапазон [0, PERCENT_SCALE]. Проверка выполняется один раз при
    построении конфигурации, core-арифметика её не повторяет.

    Raises:
        ValueError: Если percent вне [0, PERCENT_SCALE]
    """
    if isinstance(percent, bool) or not isinstance(percent, int):
        raise ValueError(f"percent must be an integer, got {percent!r}")

    if percent < 0 or percent > PERCENT_SCALE:
        raise ValueError(f"percent must be in [0, {PERCENT_SCALE}], got {percent}")

    return percent
