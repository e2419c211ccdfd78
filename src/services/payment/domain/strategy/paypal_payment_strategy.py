import hmac

from aws_lambda_powertools import Logger

from services.payment.domain.repository import CredentialDirectory
from services.payment.domain.value_object import PayPalCredential
from services.shared.domain import Money
from services.shared.domain.exception import (
    PaymentRejectedException,
    PaymentRejectionReason,
)

from .payment_strategy import PaymentStrategy

logger = Logger()


class PayPalPaymentStrategy(PaymentStrategy):
    """PayPal 決済

    認証情報をディレクトリと照合する。残高は管理せず、
    認証が通れば決済済み（オーソリ済み）とみなす。
    """

    def __init__(
        self, credential: PayPalCredential | None, directory: CredentialDirectory
    ) -> None:
        self._credential = credential
        self._directory = directory

    @property
    def name(self) -> str:
        return "PayPal"

    def validate(self) -> bool:
        if self._credential is None or not self._credential.is_present():
            return False
        secret = self._directory.find_secret(self._credential.email)
        if secret is None:
            return False
        return hmac.compare_digest(
            secret.encode("utf-8"), self._credential.password.encode("utf-8")
        )

    def pay(self, amount: Money) -> bool:
        if not self.validate():
            raise PaymentRejectedException(
                "PayPal credentials are not valid.",
                reason=PaymentRejectionReason.INVALID_CREDENTIAL,
            )

        logger.info(
            f"Paying {amount} using PayPal.",
            extra={"account": self._credential.email, "amount": str(amount)},
        )
        return True
