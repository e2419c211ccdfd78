import pytest

from services.payment.domain.strategy import PayPalPaymentStrategy
from services.payment.domain.value_object import PayPalCredential
from services.shared.domain import Money
from services.shared.domain.exception import (
    PaymentRejectedException,
    PaymentRejectionReason,
)


class TestPayPalPaymentStrategy:
    """PayPalPaymentStrategy のテスト"""

    def test_name(self, directory):
        assert PayPalPaymentStrategy(None, directory).name == "PayPal"

    def test_validate_known_credential(self, paypal_credential, directory):
        assert PayPalPaymentStrategy(paypal_credential, directory).validate() is True

    @pytest.mark.parametrize(
        "email, password",
        [
            ("traveler@example.com", "wrong"),
            ("unknown@example.com", "s3cret"),
            ("", ""),
        ],
    )
    def test_validate_rejects_bad_credentials(self, directory, email, password):
        credential = PayPalCredential(email=email, password=password)
        assert PayPalPaymentStrategy(credential, directory).validate() is False

    def test_validate_without_credential(self, directory):
        assert PayPalPaymentStrategy(None, directory).validate() is False

    def test_pay(self, paypal_credential, directory):
        strategy = PayPalPaymentStrategy(paypal_credential, directory)
        assert strategy.pay(Money.jpy(100)) is True

    def test_pay_with_bad_credentials_is_rejected(self, directory):
        credential = PayPalCredential(email="traveler@example.com", password="x")
        strategy = PayPalPaymentStrategy(credential, directory)

        with pytest.raises(PaymentRejectedException) as exc_info:
            strategy.pay(Money.jpy(100))

        assert exc_info.value.reason == PaymentRejectionReason.INVALID_CREDENTIAL
        assert exc_info.value.is_retryable_with_other_method is False
