from unittest.mock import MagicMock

import pytest

from services.flight.domain.value_object import Passenger
from services.order.domain import Customer, FlightOrder, OrderId
from services.payment.domain.strategy import PaymentStrategy
from services.shared.domain import Money


@pytest.fixture
def customer():
    return Customer(name="Alice", email="alice@example.com")


@pytest.fixture
def create_order(create_flight, customer):
    """FlightOrder を生成する Factory fixture"""

    def _factory(
        order_id: str = "order_test",
        price: Money = Money.jpy(100),
        passenger_names: list[str] | None = None,
        flight_count: int = 1,
        **kwargs,
    ) -> FlightOrder:
        flights = [
            create_flight(flight_number=f"NH{i + 1:03d}") for i in range(flight_count)
        ]
        return FlightOrder(
            id=OrderId(value=order_id),
            customer=customer,
            passengers=[Passenger(name=n) for n in passenger_names or ["Alice"]],
            flights=flights,
            price=price,
            **kwargs,
        )

    return _factory


@pytest.fixture
def create_strategy():
    """PaymentStrategy のモックを生成する Factory fixture"""

    def _factory(
        valid: bool = True, pays: bool = True, name: str = "Mock"
    ) -> MagicMock:
        strategy = MagicMock(spec=PaymentStrategy)
        strategy.name = name
        strategy.validate.return_value = valid
        strategy.pay.return_value = pays
        return strategy

    return _factory
