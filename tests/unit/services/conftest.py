from decimal import Decimal

import pytest

from services.flight.domain.capacity import AircraftCapacity
from services.flight.domain.entity import ScheduledFlight
from services.flight.domain.observer import FlightObserver
from services.flight.domain.value_object import FlightNumber, Passenger
from services.shared.domain import Currency, IsoDateTime, Money


class RecordingObserver(FlightObserver):
    """受け取った通知を共有ログへ記録するオブザーバー"""

    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    def on_passengers_added(self, flight, count):
        self.log.append((self.name, "added", count))

    def on_passengers_removed(self, flight, count):
        self.log.append((self.name, "removed", count))

    def on_price_changed(self, flight, old_price, new_price):
        self.log.append((self.name, "price", old_price, new_price))

    def on_flight_cancelled(self, flight):
        self.log.append((self.name, "cancelled"))


@pytest.fixture
def create_flight():
    """ScheduledFlight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_number: str = "NH001",
        departure_time: str = "2030-01-01T10:00:00",
        passenger_capacity: int = 100,
        crew_capacity: int = 8,
        price_amount: Decimal = Decimal("100"),
        passengers: list[str] | None = None,
    ) -> ScheduledFlight:
        return ScheduledFlight(
            flight_number=FlightNumber(value=flight_number),
            departure_time=IsoDateTime.from_string(departure_time),
            aircraft=AircraftCapacity(
                model="A350", passengers=passenger_capacity, crew=crew_capacity
            ),
            price=Money(amount=price_amount, currency=Currency.jpy()),
            passengers=[Passenger(name=name) for name in passengers or []],
        )

    return _factory


@pytest.fixture
def event_log() -> list:
    return []


@pytest.fixture
def create_observer(event_log):
    """RecordingObserver を生成する Factory fixture"""

    def _factory(name: str = "observer") -> RecordingObserver:
        return RecordingObserver(name, event_log)

    return _factory
