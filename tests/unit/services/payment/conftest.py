from datetime import date

import pytest

from services.payment.domain.value_object import CreditCard, PayPalCredential
from services.payment.infrastructure.in_memory_balance_ledger import (
    InMemoryBalanceLedger,
)
from services.payment.infrastructure.in_memory_credential_directory import (
    InMemoryCredentialDirectory,
)
from services.shared.domain import Money

VALID_CARD_NUMBER = "4111111111111111"
TODAY = date(2026, 10, 18)


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def ledger():
    return InMemoryBalanceLedger()


@pytest.fixture
def directory():
    return InMemoryCredentialDirectory({"traveler@example.com": "s3cret"})


@pytest.fixture
def create_card():
    """CreditCard を生成する Factory fixture"""

    def _factory(
        number: str = VALID_CARD_NUMBER,
        expiration_date: date = date(2030, 12, 1),
        cvv: str = "123",
    ) -> CreditCard:
        return CreditCard(number=number, expiration_date=expiration_date, cvv=cvv)

    return _factory


@pytest.fixture
def funded_card(create_card, ledger):
    """残高 150 JPY が登録されたカードを返す Factory fixture"""

    def _factory(balance: Money = Money.jpy(150)) -> CreditCard:
        card = create_card()
        ledger.open_account(card.number, balance)
        return card

    return _factory


@pytest.fixture
def paypal_credential():
    return PayPalCredential(email="traveler@example.com", password="s3cret")
