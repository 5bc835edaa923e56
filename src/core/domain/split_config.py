"""
SplitConfig — Фиксированная конфигурация split-правила

Immutable Pydantic модель:
- owner_one / owner_two — два бенефициара (payment credentials)
- percent — доля owner_one в единицах 1/10000
- check_id — идентификатор, под которым в транзакции лежит
  companion-authorization marker (withdrawal этого же правила)

Конфигурация задаётся при deployment и не меняется в runtime.
Диапазон percent и различие владельцев проверяются здесь, один раз,
а не на каждом вызове gate.
"""

import json
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.contracts import validate_split_config
from src.core.domain.units import normalize_credential, validate_percent


class SplitConfig(BaseModel):
    """
    Конфигурация split-правила для двух бенефициаров.

    percent / 10000 — доля owner_one, (10000 - percent) / 10000 — доля owner_two.
    """

    owner_one: str = Field(..., description="Payment credential первого бенефициара")
    owner_two: str = Field(..., description="Payment credential второго бенефициара")
    percent: int = Field(..., strict=True, description="Доля owner_one в 1/10000")
    check_id: str = Field(..., description="Id правила, под которым лежит companion withdrawal")

    model_config = {"frozen": True}

    @field_validator("owner_one", "owner_two", "check_id", mode="before")
    @classmethod
    def validate_credential(cls, v: Any) -> str:
        return normalize_credential(v)

    @field_validator("percent")
    @classmethod
    def validate_percent_range(cls, v: int) -> int:
        return validate_percent(v)

    @model_validator(mode="after")
    def validate_distinct_owners(self) -> "SplitConfig":
        """Один и тот же credential в обеих ролях делает любую подпись ambiguous."""
        if self.owner_one == self.owner_two:
            raise ValueError("owner_one and owner_two must be different credentials")
        return self

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "SplitConfig":
        """
        Построение конфигурации из JSON-документа.

        Raises:
            jsonschema.ValidationError: Документ не соответствует split_config схеме
            pydantic.ValidationError: Нарушены инварианты модели
        """
        validate_split_config(data)
        return cls.model_validate(data)


def load_split_config(path: Union[str, Path]) -> SplitConfig:
    """
    Загрузка SplitConfig из JSON файла.

    Args:
        path: Путь к JSON файлу конфигурации

    Returns:
        Провалидированный SplitConfig

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Split config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return SplitConfig.from_contract(data)
