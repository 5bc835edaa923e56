"""Gatekeeper — gates split-правила и их точки входа.

- GATE SPEND: присутствие companion withdrawal (на каждый input)
- GATE WITHDRAW: распределение между двумя владельцами (один раз на транзакцию)
- GATE PUBLISH: авторизация stake certificate
"""

from .split_validator import SplitValidator

__all__ = [
    "SplitValidator",
]
