from datetime import date
from typing import Callable

from pydantic import TypeAdapter

from services.payment.domain.repository import BalanceLedger, CredentialDirectory
from services.payment.domain.strategy import (
    CreditCardPaymentStrategy,
    PaymentStrategy,
    PayPalPaymentStrategy,
)
from services.payment.domain.value_object import CreditCard, PayPalCredential

from .payment_method_details import (
    CreditCardDetails,
    PaymentMethodDetails,
    PayPalDetails,
)

_details_adapter: TypeAdapter[CreditCardDetails | PayPalDetails] = TypeAdapter(
    PaymentMethodDetails
)


class PaymentStrategyFactory:
    """決済戦略のファクトリ

    - 入力スキーマ（pydantic）から Value Object への変換
    - 決済手段ごとのバックエンド（台帳・認証ディレクトリ）の注入
    """

    def __init__(
        self,
        ledger: BalanceLedger,
        directory: CredentialDirectory,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._ledger = ledger
        self._directory = directory
        self._today = today

    def create(self, details: CreditCardDetails | PayPalDetails) -> PaymentStrategy:
        """入力スキーマから決済戦略を生成する"""
        if isinstance(details, CreditCardDetails):
            card = CreditCard(
                number=details.number,
                expiration_date=details.expiration_date,
                cvv=details.cvv,
            )
            return CreditCardPaymentStrategy(card, self._ledger, today=self._today)

        if isinstance(details, PayPalDetails):
            credential = PayPalCredential(
                email=details.email, password=details.password
            )
            return PayPalPaymentStrategy(credential, self._directory)

        raise TypeError(f"Unsupported payment method details: {type(details)!r}")

    def create_from_payload(self, payload: dict) -> PaymentStrategy:
        """生の入力（dict）を検証してから決済戦略を生成する

        Raises:
            pydantic.ValidationError: 入力が不正な場合
        """
        return self.create(_details_adapter.validate_python(payload))

    def credit_card(
        self, number: str, expiration_date: date, cvv: str
    ) -> PaymentStrategy:
        """クレジットカード決済戦略を生成する"""
        return self.create(
            CreditCardDetails(number=number, expiration_date=expiration_date, cvv=cvv)
        )

    def paypal(self, email: str, password: str) -> PaymentStrategy:
        """PayPal 決済戦略を生成する"""
        return self.create(PayPalDetails(email=email, password=password))
