"""Gates — индивидуальные гейты split-правила.

- GATE SPEND: Delegated Gate (presence check, без accounting)
- GATE WITHDRAW: Split Enforcer (net accounting + floor-границы)
- GATE PUBLISH: Certificate Gate (подпись хотя бы одного владельца)
"""

from .gate_publish_certificate import CertificateResult, GatePublishCertificate, check_certificate
from .gate_spend_delegation import DelegationResult, GateSpendDelegation, check_delegation
from .gate_withdraw_split import GateWithdrawSplit, SplitEnforcerResult, enforce

__all__ = [
    "GateSpendDelegation",
    "DelegationResult",
    "check_delegation",
    "GateWithdrawSplit",
    "SplitEnforcerResult",
    "enforce",
    "GatePublishCertificate",
    "CertificateResult",
    "check_certificate",
]
