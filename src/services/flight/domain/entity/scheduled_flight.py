from __future__ import annotations

from collections.abc import Iterable

from services.flight.domain.capacity import CapacityProvider
from services.flight.domain.enum import FlightStatus
from services.flight.domain.observer import (
    FlightEventPublisher,
    FlightObserver,
    Subscription,
)
from services.flight.domain.value_object import FlightNumber, Passenger
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class ScheduledFlight(AggregateRoot[FlightNumber]):
    """運航予定のフライト（予約可能な便）

    搭乗者・運賃・欠航の状態変化は、変更を反映した後に
    登録済みの全オブザーバーへ同期的に通知される。

    定員超過のチェックは注文生成側の責務であり、
    このエンティティは定員を超える追加を拒否しない。
    """

    def __init__(
        self,
        flight_number: FlightNumber,
        departure_time: IsoDateTime,
        aircraft: CapacityProvider,
        price: Money,
        passengers: Iterable[Passenger] = (),
        status: FlightStatus = FlightStatus.SCHEDULED,
    ) -> None:
        super().__init__(flight_number)

        self._departure_time = departure_time
        self._aircraft = aircraft
        self._price = price
        self._passengers: list[Passenger] = list(passengers)
        self._status = status
        self._publisher = FlightEventPublisher()

    def __str__(self) -> str:
        return f"{self.id}@{self._departure_time}"

    @property
    def flight_number(self) -> FlightNumber:
        return self.id

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def current_price(self) -> Money:
        return self._price

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._passengers)

    @property
    def status(self) -> FlightStatus:
        return self._status

    @property
    def is_cancelled(self) -> bool:
        return self._status == FlightStatus.CANCELLED

    @property
    def capacity(self) -> int:
        return self._aircraft.passenger_capacity()

    @property
    def crew_capacity(self) -> int:
        return self._aircraft.crew_capacity()

    @property
    def available_capacity(self) -> int:
        """空席数（定員 - 現在の搭乗者数）"""
        return self.capacity - len(self._passengers)

    # -- オブザーバー管理 --------------------------------------------------

    def add_observer(self, observer: FlightObserver) -> Subscription:
        return self._publisher.subscribe(observer)

    def remove_observer(self, observer: FlightObserver) -> None:
        self._publisher.unsubscribe_observer(observer)

    @property
    def observers(self) -> list[FlightObserver]:
        return self._publisher.observers

    # -- 状態変更 ----------------------------------------------------------

    def add_passengers(self, passengers: Iterable[Passenger]) -> None:
        """搭乗者を追加する（0 人なら通知しない）"""
        if self.is_cancelled:
            raise BusinessRuleViolationException(
                f"Cannot add passengers to cancelled flight {self}"
            )
        added = list(passengers)
        self._passengers.extend(added)
        count = len(added)
        if count > 0:
            self._publisher.publish(lambda o: o.on_passengers_added(self, count))

    def remove_passengers(self, passengers: Iterable[Passenger]) -> None:
        """搭乗者を削除する

        実際に搭乗していた人数だけを数え、0 人なら通知しない。
        """
        count = 0
        for passenger in passengers:
            try:
                self._passengers.remove(passenger)
            except ValueError:
                continue
            count += 1

        if count > 0:
            self._publisher.publish(lambda o: o.on_passengers_removed(self, count))

    def set_price(self, price: Money) -> None:
        """運賃を変更する"""
        old_price = self._price
        self._price = price
        self._publisher.publish(lambda o: o.on_price_changed(self, old_price, price))

    def cancel(self) -> None:
        """欠航にする（欠航済みなら何もしない）"""
        if self.is_cancelled:
            return
        self._status = FlightStatus.CANCELLED
        self._publisher.publish(lambda o: o.on_flight_cancelled(self))
