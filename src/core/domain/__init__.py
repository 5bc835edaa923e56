"""
Domain models and value objects.

Contains fundamental domain entities like TransactionView, SplitConfig, Verdict.
"""

from src.core.domain.split_config import SplitConfig, load_split_config
from src.core.domain.transaction import (
    Certificate,
    CertificateKind,
    OutputReference,
    TransactionView,
    TxInput,
    TxOutput,
    Value,
)
from src.core.domain.units import (
    CREDENTIAL_HASH_BYTES,
    PERCENT_SCALE,
    TX_ID_BYTES,
    normalize_credential,
    normalize_tx_id,
    validate_amount,
    validate_percent,
)
from src.core.domain.verdict import EntryPoint, RejectReason, TransactionRejected, Verdict

__all__ = [
    # Units module
    "CREDENTIAL_HASH_BYTES",
    "TX_ID_BYTES",
    "PERCENT_SCALE",
    "normalize_credential",
    "normalize_tx_id",
    "validate_amount",
    "validate_percent",
    # Transaction view
    "TransactionView",
    "TxInput",
    "TxOutput",
    "Value",
    "OutputReference",
    "Certificate",
    "CertificateKind",
    # Configuration
    "SplitConfig",
    "load_split_config",
    # Verdict
    "Verdict",
    "RejectReason",
    "EntryPoint",
    "TransactionRejected",
]
