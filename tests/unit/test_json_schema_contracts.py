"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов, constraints
- Интеграция с Pydantic моделями (TransactionView.from_contract)
"""

import copy
from importlib import resources

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SplitConfigValidator,
    TransactionViewValidator,
    load_schema,
    validate_split_config,
    validate_transaction_view,
)
from src.core.domain import CertificateKind, SplitConfig, TransactionView
from src.gatekeeper import SplitValidator
from tests.factories import CHECK_ID, OWNER_ONE, OWNER_TWO, THIRD_PARTY, tx_id


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_transaction_view():
    """Валидный transaction_view: owner_one выводит 50/50 pool."""
    return {
        "inputs": [
            {
                "output_ref": {"tx_id": tx_id(1), "index": 0},
                "credential": OWNER_ONE,
                "value": {"amount": 5_000_000},
            },
            {
                "output_ref": {"tx_id": tx_id(2), "index": 1},
                "credential": OWNER_TWO,
                "value": {"amount": 5_000_000, "assets": {"policy.token": 3}},
            },
        ],
        "outputs": [
            {"credential": OWNER_ONE, "value": {"amount": 5_000_000}},
            {"credential": OWNER_TWO, "value": {"amount": 5_000_000}},
        ],
        "signatories": [OWNER_ONE],
        "certificate": None,
        "withdrawals": {CHECK_ID: 0},
    }


@pytest.fixture
def valid_split_config():
    return {"owner_one": OWNER_ONE, "owner_two": OWNER_TWO, "percent": 5000, "check_id": CHECK_ID}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    def test_schemas_load(self):
        for name in ("transaction_view", "split_config"):
            schema = load_schema(name)
            assert schema["type"] == "object"

    def test_schema_cached(self):
        assert load_schema("split_config") is load_schema("split_config")

    def test_validators_share_schema(self):
        assert SplitConfigValidator().schema is load_schema("split_config")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_schemas_shipped_inside_package(self):
        """Схемы читаются из package data, а не из корня репозитория."""
        root = resources.files("src.core.contracts") / "schema"
        assert sorted(p.name for p in root.iterdir() if p.name.endswith(".json")) == [
            "split_config.json",
            "transaction_view.json",
        ]


# =============================================================================
# TRANSACTION VIEW CONTRACT
# =============================================================================


class TestTransactionViewContract:
    def test_valid(self, valid_transaction_view):
        validate_transaction_view(valid_transaction_view)
        assert TransactionViewValidator().is_valid(valid_transaction_view)

    def test_missing_required(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        del data["signatories"]
        with pytest.raises(ValidationError):
            validate_transaction_view(data)

    def test_negative_amount(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        data["outputs"][0]["value"]["amount"] = -1
        assert not TransactionViewValidator().is_valid(data)

    def test_bad_credential_pattern(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        data["signatories"] = ["deadbeef"]
        with pytest.raises(ValidationError):
            validate_transaction_view(data)

    def test_unknown_field(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        data["validity_range"] = [0, 100]
        assert not TransactionViewValidator().is_valid(data)

    def test_certificate_kind_enum(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        data["certificate"] = {"kind": "RETIRE_POOL", "credential": CHECK_ID}
        errors = list(TransactionViewValidator().iter_errors(data))
        assert errors

    def test_from_contract_builds_model(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        data["certificate"] = {"kind": "DELEGATE", "credential": CHECK_ID}
        view = TransactionView.from_contract(data)

        assert len(view.inputs) == 2
        assert view.inputs[1].value.assets == {"policy.token": 3}
        assert view.certificate.kind == CertificateKind.DELEGATE
        assert view.is_signed_by(OWNER_ONE)

    def test_from_contract_rejects_before_model(self, valid_transaction_view):
        data = copy.deepcopy(valid_transaction_view)
        data["outputs"][0]["value"] = {"amount": "5000000"}
        with pytest.raises(ValidationError):
            TransactionView.from_contract(data)

    def test_contract_to_verdict(self, valid_transaction_view, valid_split_config):
        """JSON документы → SplitConfig + TransactionView → Verdict."""
        validator = SplitValidator(SplitConfig.from_contract(valid_split_config))
        view = TransactionView.from_contract(valid_transaction_view)

        assert validator.withdraw(view).accepted is True

        data = copy.deepcopy(valid_transaction_view)
        data["outputs"].append({"credential": THIRD_PARTY, "value": {"amount": 1}})
        assert validator.withdraw(TransactionView.from_contract(data)).accepted is False


# =============================================================================
# SPLIT CONFIG CONTRACT
# =============================================================================


class TestSplitConfigContract:
    def test_valid(self, valid_split_config):
        validate_split_config(valid_split_config)

    @pytest.mark.parametrize("percent", [-1, 10_001])
    def test_percent_range(self, valid_split_config, percent):
        data = dict(valid_split_config, percent=percent)
        assert not SplitConfigValidator().is_valid(data)

    def test_percent_must_be_integer(self, valid_split_config):
        data = dict(valid_split_config, percent=50.5)
        with pytest.raises(ValidationError):
            validate_split_config(data)

    def test_missing_check_id(self, valid_split_config):
        data = dict(valid_split_config)
        del data["check_id"]
        with pytest.raises(ValidationError):
            validate_split_config(data)
