from datetime import date
from typing import Callable

from aws_lambda_powertools import Logger

from services.payment.domain.repository import BalanceLedger
from services.payment.domain.value_object import CreditCard
from services.shared.domain import Money
from services.shared.domain.exception import (
    PaymentRejectedException,
    PaymentRejectionReason,
)

from .payment_strategy import PaymentStrategy

logger = Logger()


class CreditCardPaymentStrategy(PaymentStrategy):
    """クレジットカード決済

    残高（利用可能枠）は台帳で管理し、決済額を差し引く。
    差し引き後の残高が負になる場合は拒否する。
    """

    def __init__(
        self,
        credit_card: CreditCard | None,
        ledger: BalanceLedger,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._credit_card = credit_card
        self._ledger = ledger
        self._today = today

    @property
    def name(self) -> str:
        return "Credit Card"

    @property
    def credit_card(self) -> CreditCard | None:
        return self._credit_card

    @property
    def balance(self) -> Money | None:
        """台帳上の現在の残高"""
        if self._credit_card is None:
            return None
        return self._ledger.balance_of(self._credit_card.number)

    def validate(self) -> bool:
        if self._credit_card is None:
            return False
        if not self._credit_card.is_valid(self._today()):
            return False
        return self.balance is not None

    def pay(self, amount: Money) -> bool:
        if not self.validate():
            raise PaymentRejectedException(
                "Credit card information is not valid.",
                reason=PaymentRejectionReason.INVALID_CREDENTIAL,
            )

        card = self._credit_card
        balance = self._ledger.balance_of(card.number)
        logger.info(
            f"Paying {amount} using Credit Card.",
            extra={"card": card.masked_number, "amount": str(amount)},
        )

        if balance.currency != amount.currency:
            logger.info(
                "Card currency does not match",
                extra={
                    "card": card.masked_number,
                    "card_currency": str(balance.currency),
                    "currency": str(amount.currency),
                },
            )
            raise PaymentRejectedException(
                f"Card cannot be charged in {amount.currency}",
                reason=PaymentRejectionReason.INSUFFICIENT_FUNDS,
            )

        if balance.is_less_than(amount):
            logger.info(
                "Card limit reached",
                extra={"card": card.masked_number, "balance": str(balance)},
            )
            raise PaymentRejectedException(
                "Card limit reached",
                reason=PaymentRejectionReason.INSUFFICIENT_FUNDS,
            )

        self._ledger.update_balance(
            card.number, balance.subtract(amount), expected_balance=balance
        )
        return True
