"""
JSON Schema Contract Validators

Проверка JSON документов, которые hosting ledger и deployment передают
split-правилу, против формальных JSON Schema контрактов (Draft 2020-12).

Схемы поставляются вместе с пакетом (src/core/contracts/schema/*.json)
и читаются через importlib.resources, поэтому работают и после обычной
(не editable) установки. Загрузка ленивая: при импорте модуля файлы
не читаются.

Схемы:
- transaction_view.json (проекция транзакции для gates)
- split_config.json (owner_one / owner_two / percent / check_id)
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение схемы из package data с meta-validation.

    Результат кэшируется: повторный вызов возвращает тот же объект.

    Raises:
        FileNotFoundError: Схема с таким именем не поставляется
        ValueError: Файл не является валидной Draft 2020-12 схемой
    """
    resource = resources.files(__package__) / SCHEMA_DIR / f"{schema_name}.json"
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not packaged: {SCHEMA_DIR}/{schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def _compiled(schema_name: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор одного контракта; скомпилированная схема общая для всех экземпляров."""

    schema_name: str = ""

    def __init__(self):
        self.validator = _compiled(self.schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class TransactionViewValidator(ContractValidator):
    schema_name = "transaction_view"


class SplitConfigValidator(ContractValidator):
    schema_name = "split_config"


def validate_transaction_view(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Документ не соответствует transaction_view схеме
    """
    TransactionViewValidator().validate(data)


def validate_split_config(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Документ не соответствует split_config схеме
    """
    SplitConfigValidator().validate(data)
