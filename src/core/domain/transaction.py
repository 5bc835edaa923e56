"""
TransactionView — Read-only проекция предлагаемой транзакции

Immutable Pydantic модели, содержащие только поля, которые читают gates:
- inputs (owning credential + value)
- outputs (destination credential + value)
- signatories (множество подписавших credentials)
- certificate (опционально, для publish)
- withdrawals (companion-authorization markers: target id → amount)

Никакие другие поля транзакции не читаются.
Полная совместимость с JSON Schema (contracts/schema/transaction_view.json).
"""

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, FrozenSet, Optional, Tuple

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer, field_validator

from src.core.contracts import validate_transaction_view
from src.core.domain.units import normalize_credential, normalize_tx_id, validate_amount


# Словарь сумм только для чтения: MappingProxyType, мутация бросает TypeError.
# Сериализуется в обычный dict.
ReadOnlyAmounts = Annotated[
    Dict[str, int],
    AfterValidator(MappingProxyType),
    PlainSerializer(lambda v: dict(v), return_type=Dict[str, int]),
]


# =============================================================================
# ENUMS
# =============================================================================


class CertificateKind(str, Enum):
    """Тип stake-операции, которую публикует certificate"""

    REGISTER = "REGISTER"
    DEREGISTER = "DEREGISTER"
    DELEGATE = "DELEGATE"


# =============================================================================
# NESTED MODELS
# =============================================================================


class Value(BaseModel):
    """
    Стоимость, прикреплённая к input/output.

    amount — единственная designated unit, которую учитывает accounting.
    assets — прочие активы; хранятся для полноты проекции, но всегда
    игнорируются расчётами net position.
    """

    amount: int = Field(..., description="Сумма в designated unit")
    assets: ReadOnlyAmounts = Field(
        default_factory=dict,
        validate_default=True,
        description="Прочие активы (asset id → quantity), не учитываются",
    )

    model_config = {"frozen": True}

    @field_validator("amount", mode="before")
    @classmethod
    def check_amount(cls, v: Any) -> int:
        return validate_amount(v)


class OutputReference(BaseModel):
    """Ссылка на расходуемый UTxO: (tx_id, index)."""

    tx_id: str = Field(..., description="Transaction id (32 байта, hex)")
    index: int = Field(..., ge=0, strict=True, description="Индекс output в транзакции")

    model_config = {"frozen": True}

    @field_validator("tx_id", mode="before")
    @classmethod
    def validate_tx_id(cls, v: Any) -> str:
        return normalize_tx_id(v)


class TxInput(BaseModel):
    """
    Input транзакции.

    credential — payment credential владельца расходуемого output.
    """

    output_ref: OutputReference = Field(..., description="Ссылка на расходуемый output")
    credential: str = Field(..., description="Owning payment credential (hex)")
    value: Value = Field(..., description="Стоимость расходуемого output")

    model_config = {"frozen": True}

    @field_validator("credential", mode="before")
    @classmethod
    def validate_credential(cls, v: Any) -> str:
        return normalize_credential(v)


class TxOutput(BaseModel):
    """Output транзакции: destination payment credential + value."""

    credential: str = Field(..., description="Destination payment credential (hex)")
    value: Value = Field(..., description="Стоимость output")

    model_config = {"frozen": True}

    @field_validator("credential", mode="before")
    @classmethod
    def validate_credential(cls, v: Any) -> str:
        return normalize_credential(v)


class Certificate(BaseModel):
    """
    Stake-операция, публикуемая транзакцией.

    Содержимое certificate не влияет на решение CertificateGate:
    решает только наличие подписи одного из владельцев.
    """

    kind: CertificateKind = Field(..., description="Тип stake-операции")
    credential: str = Field(..., description="Stake credential, к которому относится certificate")

    model_config = {"frozen": True}

    @field_validator("credential", mode="before")
    @classmethod
    def validate_credential(cls, v: Any) -> str:
        return normalize_credential(v)


# =============================================================================
# TRANSACTION VIEW
# =============================================================================


class TransactionView(BaseModel):
    """
    Снапшот транзакции для одного вызова валидации.

    Immutable модель (frozen=True). Строится один раз на вызов внешним
    коллаборатором (hosting ledger) и никогда не мутируется.
    Порядок inputs/outputs сохраняется, но на решение не влияет.
    """

    inputs: Tuple[TxInput, ...] = Field(default=(), description="Inputs (упорядоченные)")
    outputs: Tuple[TxOutput, ...] = Field(default=(), description="Outputs (упорядоченные)")
    signatories: FrozenSet[str] = Field(
        default_factory=frozenset, description="Credentials, подписавшие транзакцию"
    )
    certificate: Optional[Certificate] = Field(None, description="Stake certificate (publish)")
    withdrawals: ReadOnlyAmounts = Field(
        default_factory=dict,
        validate_default=True,
        description="Companion-authorization markers: target id → amount",
    )

    model_config = {"frozen": True}

    @field_validator("signatories", mode="before")
    @classmethod
    def validate_signatories(cls, v: Any) -> FrozenSet[str]:
        """Нормализация всех signer credentials."""
        if v is None:
            return frozenset()
        return frozenset(normalize_credential(s) for s in v)

    @field_validator("withdrawals", mode="before")
    @classmethod
    def validate_withdrawals(cls, v: Any) -> Dict[str, int]:
        """Нормализация target id; дубликаты после нормализации запрещены."""
        if v is None:
            return {}

        normalized: Dict[str, int] = {}
        for target, amount in dict(v).items():
            key = normalize_credential(target)
            if key in normalized:
                raise ValueError(f"Duplicate withdrawal marker for {key}")
            normalized[key] = validate_amount(amount, f"withdrawal amount for {key}")
        return normalized

    def is_signed_by(self, credential: str) -> bool:
        """Проверка наличия credential среди signatories."""
        return normalize_credential(credential) in self.signatories

    def has_withdrawal(self, target: str) -> bool:
        """Проверка наличия companion marker для target id."""
        return normalize_credential(target) in self.withdrawals

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "TransactionView":
        """
        Построение view из JSON-документа hosting ledger.

        Сначала документ проверяется против transaction_view JSON Schema,
        затем строится Pydantic модель.

        Raises:
            jsonschema.ValidationError: Документ не соответствует схеме
            pydantic.ValidationError: Документ не проходит валидацию модели
        """
        validate_transaction_view(data)
        return cls.model_validate(data)
