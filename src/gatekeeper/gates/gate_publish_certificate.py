"""GATE PUBLISH: Certificate Gate — авторизация stake-операций

Certificate (регистрация, делегирование, снятие регистрации) допускается,
если транзакцию подписал хотя бы один из владельцев. Используется OR, а не
XOR, как в GATE WITHDRAW. Accounting не выполняется, содержимое
certificate на решение не влияет.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.transaction import Certificate, TransactionView
from src.core.domain.units import normalize_credential
from src.core.domain.verdict import RejectReason
from src.core.logging_setup import get_logger

_logger = get_logger("gatekeeper.publish_certificate")


@dataclass(frozen=True)
class CertificateResult:
    """Результат GATE PUBLISH."""

    accepted: bool
    reject_reason: Optional[RejectReason]

    certificate: Optional[Certificate]
    signed_by_one: bool
    signed_by_two: bool

    details: str


class GatePublishCertificate:
    """GATE PUBLISH: хотя бы один владелец подписал транзакцию."""

    def __init__(self, owner_one: str, owner_two: str):
        """Gate зависит только от двух владельцев (percent и check_id не участвуют)."""
        self.owner_one = normalize_credential(owner_one)
        self.owner_two = normalize_credential(owner_two)

    def evaluate(
        self,
        view: TransactionView,
        certificate: Optional[Certificate] = None,
    ) -> CertificateResult:
        """Оценка GATE PUBLISH.

        Args:
            view: проекция транзакции
            certificate: публикуемый certificate; по умолчанию view.certificate

        Returns:
            CertificateResult с решением о допуске
        """
        certificate = certificate if certificate is not None else view.certificate
        signed_by_one = self.owner_one in view.signatories
        signed_by_two = self.owner_two in view.signatories

        if not (signed_by_one or signed_by_two):
            _logger.debug("certificate %s rejected: no owner signature", certificate)
            return CertificateResult(
                accepted=False,
                reject_reason=RejectReason.UNAUTHORIZED,
                certificate=certificate,
                signed_by_one=False,
                signed_by_two=False,
                details="neither owner signed the certificate transaction",
            )

        kind = certificate.kind.value if certificate is not None else "none"
        return CertificateResult(
            accepted=True,
            reject_reason=None,
            certificate=certificate,
            signed_by_one=signed_by_one,
            signed_by_two=signed_by_two,
            details=f"PASS: certificate={kind}, signed_by_one={signed_by_one}, signed_by_two={signed_by_two}",
        )


def check_certificate(view: TransactionView, owner_one: str, owner_two: str) -> CertificateResult:
    """Однократная проверка GATE PUBLISH без явного построения gate."""
    return GatePublishCertificate(owner_one, owner_two).evaluate(view)
