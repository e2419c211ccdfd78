from collections.abc import Sequence

from services.flight.domain.entity import ScheduledFlight
from services.flight.domain.value_object import Passenger
from services.order.domain.entity import FlightOrder
from services.order.domain.factory import FlightOrderFactory
from services.order.domain.value_object import Customer


class PlaceOrderService:
    """注文受付ユースケース"""

    def __init__(self, factory: FlightOrderFactory) -> None:
        self._factory = factory

    def place(
        self,
        customer: Customer,
        passenger_names: Sequence[str],
        flights: Sequence[ScheduledFlight],
    ) -> FlightOrder:
        """注文を受け付ける

        Returns:
            FlightOrder: 未決済（OPEN）の注文
        """
        passengers = [Passenger(name=name) for name in passenger_names]
        return self._factory.create(customer, passengers, flights)
