import os
from collections.abc import Iterable, Sequence

from services.flight.domain.entity import ScheduledFlight
from services.flight.domain.value_object import Passenger
from services.order.domain.entity import FlightOrder
from services.order.domain.enum import OrderStatus
from services.order.domain.value_object import Customer, OrderId
from services.shared.domain import Money
from services.shared.domain.exception import BusinessRuleViolationException

DEFAULT_NO_FLY_LIST = ("Peter", "Johannes")


def _no_fly_list_from_env() -> frozenset[str]:
    raw = os.getenv("NO_FLY_LIST")
    if raw is None:
        return frozenset(DEFAULT_NO_FLY_LIST)
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


class FlightOrderFactory:
    """フライト注文のファクトリ

    - 搭乗禁止リストと空席数の検証
    - 運賃の算出（各フライトの現在運賃の合計 × 搭乗者数）
    - 各フライトへの搭乗者の追加（フライトのオブザーバーへ通知される）
    """

    def __init__(self, no_fly_list: Iterable[str] | None = None) -> None:
        self._no_fly_list = (
            frozenset(no_fly_list)
            if no_fly_list is not None
            else _no_fly_list_from_env()
        )

    @property
    def no_fly_list(self) -> frozenset[str]:
        return self._no_fly_list

    def create(
        self,
        customer: Customer,
        passengers: Sequence[Passenger],
        flights: Sequence[ScheduledFlight],
    ) -> FlightOrder:
        """新規注文を生成する

        Raises:
            BusinessRuleViolationException: 注文が成立しない場合
        """
        self._validate(customer, passengers, flights)

        price = self._calculate_price(passengers, flights)

        self._add_passengers(passengers, flights)

        return FlightOrder(
            id=OrderId.generate(),
            customer=customer,
            passengers=passengers,
            flights=flights,
            price=price,
            status=OrderStatus.OPEN,
        )

    @staticmethod
    def _add_passengers(
        passengers: Sequence[Passenger], flights: Sequence[ScheduledFlight]
    ) -> None:
        """各フライトへ搭乗者を追加する

        途中のフライトで失敗した場合（オブザーバーの例外など）は、
        追加済みのフライトから搭乗者を取り除いてから例外を再送出する。
        """
        touched: list[ScheduledFlight] = []
        try:
            for flight in flights:
                touched.append(flight)
                flight.add_passengers(passengers)
        except Exception:
            for flight in reversed(touched):
                flight.remove_passengers(passengers)
            raise

    def _validate(
        self,
        customer: Customer,
        passengers: Sequence[Passenger],
        flights: Sequence[ScheduledFlight],
    ) -> None:
        if not flights:
            raise BusinessRuleViolationException(
                "An order must contain at least one flight"
            )
        if len({flight.id for flight in flights}) != len(flights):
            raise BusinessRuleViolationException(
                "An order cannot contain the same flight more than once"
            )
        if not passengers:
            raise BusinessRuleViolationException(
                "An order must contain at least one passenger"
            )
        if customer.name in self._no_fly_list:
            raise BusinessRuleViolationException(
                f"Customer {customer.name} is on the no-fly list"
            )
        banned = [p.name for p in passengers if p.name in self._no_fly_list]
        if banned:
            raise BusinessRuleViolationException(
                f"Passengers on the no-fly list: {', '.join(banned)}"
            )
        for flight in flights:
            if flight.is_cancelled:
                raise BusinessRuleViolationException(
                    f"Flight {flight} is cancelled"
                )
            if flight.available_capacity < len(passengers):
                raise BusinessRuleViolationException(
                    f"Not enough seats on flight {flight}: "
                    f"available={flight.available_capacity}, "
                    f"requested={len(passengers)}"
                )

    @staticmethod
    def _calculate_price(
        passengers: Sequence[Passenger], flights: Sequence[ScheduledFlight]
    ) -> Money:
        total = Money.zero(flights[0].current_price.currency)
        for flight in flights:
            total = total.add(flight.current_price)
        return total.multiply(len(passengers))
