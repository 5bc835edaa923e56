"""
Tests for Pydantic Domain Models

Покрывает:
- TransactionView, TxInput, TxOutput, Value, OutputReference, Certificate
- SplitConfig (диапазон percent, различие владельцев, загрузка из файла)
- Immutability (frozen=True)
- Нормализацию credentials внутри моделей
"""

import json

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.domain import (
    Certificate,
    CertificateKind,
    OutputReference,
    SplitConfig,
    TransactionView,
    TxOutput,
    Value,
    load_split_config,
)
from tests.factories import (
    CHECK_ID,
    OWNER_ONE,
    OWNER_TWO,
    make_config,
    make_input,
    make_output,
    make_view,
    tx_id,
)


# =============================================================================
# VALUE / OUTPUT REFERENCE
# =============================================================================


class TestValue:
    def test_defaults(self):
        value = Value(amount=10)
        assert value.assets == {}

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            Value(amount=-1)

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError):
            Value(amount=1.5)

    def test_bool_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Value(amount=True)

    def test_frozen(self):
        value = Value(amount=10)
        with pytest.raises(ValidationError):
            value.amount = 11

    def test_assets_read_only(self):
        value = Value(amount=10, assets={"policy.token": 3})
        with pytest.raises(TypeError):
            value.assets["policy.token"] = 4
        with pytest.raises(TypeError):
            Value(amount=10).assets["policy.token"] = 1

    def test_assets_dumped_as_dict(self):
        dumped = Value(amount=10, assets={"policy.token": 3}).model_dump()
        assert dumped == {"amount": 10, "assets": {"policy.token": 3}}
        assert type(dumped["assets"]) is dict


class TestOutputReference:
    def test_tx_id_normalized(self):
        ref = OutputReference(tx_id="AB" * 32, index=3)
        assert ref.tx_id == "ab" * 32

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            OutputReference(tx_id=tx_id(1), index=-1)


# =============================================================================
# TRANSACTION VIEW
# =============================================================================


class TestTransactionView:
    def test_empty_view(self):
        view = TransactionView()
        assert view.inputs == ()
        assert view.outputs == ()
        assert view.signatories == frozenset()
        assert view.certificate is None
        assert view.withdrawals == {}

    def test_credentials_normalized(self):
        view = make_view(
            outputs=[TxOutput(credential=OWNER_ONE.upper(), value=Value(amount=1))],
            signatories=[OWNER_TWO.upper()],
            withdrawals={CHECK_ID.upper(): 0},
        )
        assert view.outputs[0].credential == OWNER_ONE
        assert view.is_signed_by(OWNER_TWO)
        assert view.has_withdrawal(CHECK_ID)

    def test_invalid_credential_rejected(self):
        with pytest.raises(ValidationError):
            make_view(outputs=[make_output("not-a-credential", 1)])

    def test_invalid_signer_rejected(self):
        with pytest.raises(ValidationError):
            make_view(signatories=["abc"])

    def test_duplicate_withdrawal_after_normalization_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            make_view(withdrawals={CHECK_ID: 0, CHECK_ID.upper(): 1})

    def test_negative_withdrawal_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_view(withdrawals={CHECK_ID: -1})

    def test_bool_withdrawal_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            make_view(withdrawals={CHECK_ID: True})

    def test_withdrawals_read_only(self):
        view = make_view(withdrawals={})
        with pytest.raises(TypeError):
            view.withdrawals[CHECK_ID] = 0
        with pytest.raises(TypeError):
            TransactionView().withdrawals[CHECK_ID] = 0
        assert not view.has_withdrawal(CHECK_ID)

    def test_withdrawals_survive_round_trip(self):
        view = make_view(withdrawals={CHECK_ID: 5})
        rebuilt = TransactionView.model_validate(view.model_dump())
        assert rebuilt.signatories == view.signatories
        assert rebuilt.withdrawals == {CHECK_ID: 5}

    def test_order_preserved(self):
        view = make_view(inputs=[make_input(OWNER_TWO, 1, n=2), make_input(OWNER_ONE, 2, n=1)])
        assert [i.credential for i in view.inputs] == [OWNER_TWO, OWNER_ONE]

    def test_frozen(self):
        view = make_view()
        with pytest.raises(ValidationError):
            view.signatories = frozenset([OWNER_ONE])

    def test_certificate(self):
        view = make_view(certificate=Certificate(kind=CertificateKind.DEREGISTER, credential=CHECK_ID))
        assert view.certificate.kind == CertificateKind.DEREGISTER


# =============================================================================
# SPLIT CONFIG
# =============================================================================


class TestSplitConfig:
    def test_valid(self):
        config = make_config(percent=1234)
        assert config.percent == 1234
        assert config.owner_one == OWNER_ONE

    def test_credentials_normalized(self):
        config = SplitConfig(
            owner_one=OWNER_ONE.upper(), owner_two=OWNER_TWO, percent=1, check_id=CHECK_ID
        )
        assert config.owner_one == OWNER_ONE

    @pytest.mark.parametrize("percent", [-1, 10_001])
    def test_percent_out_of_range(self, percent):
        with pytest.raises(ValidationError):
            make_config(percent=percent)

    def test_percent_string_rejected(self):
        with pytest.raises(ValidationError):
            SplitConfig(owner_one=OWNER_ONE, owner_two=OWNER_TWO, percent="5000", check_id=CHECK_ID)

    def test_same_owner_rejected(self):
        with pytest.raises(ValidationError, match="different"):
            SplitConfig(owner_one=OWNER_ONE, owner_two=OWNER_ONE.upper(), percent=1, check_id=CHECK_ID)

    def test_frozen(self):
        config = make_config()
        with pytest.raises(ValidationError):
            config.percent = 1


class TestLoadSplitConfig:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "split.json"
        path.write_text(
            json.dumps(
                {"owner_one": OWNER_ONE, "owner_two": OWNER_TWO, "percent": 2500, "check_id": CHECK_ID}
            ),
            encoding="utf-8",
        )

        config = load_split_config(path)

        assert config == make_config(percent=2500)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_split_config(tmp_path / "absent.json")

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "split.json"
        path.write_text(
            json.dumps({"owner_one": OWNER_ONE, "owner_two": OWNER_TWO, "percent": 20_000}),
            encoding="utf-8",
        )

        with pytest.raises(SchemaValidationError):
            load_split_config(path)
