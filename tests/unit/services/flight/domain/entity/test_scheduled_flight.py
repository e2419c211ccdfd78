import pytest

from services.flight.domain.enum import FlightStatus
from services.flight.domain.observer import FlightObserver
from services.flight.domain.value_object import Passenger
from services.shared.domain import Money
from services.shared.domain.exception import BusinessRuleViolationException


class TestScheduledFlightCapacity:
    """ScheduledFlight の定員管理のテスト"""

    def test_available_capacity_is_capacity_minus_passengers(self, create_flight):
        """空席数 = 定員 - 搭乗者数"""
        flight = create_flight(passenger_capacity=3, passengers=["Alice"])
        assert flight.capacity == 3
        assert flight.available_capacity == 2

    def test_crew_capacity_is_read_from_aircraft(self, create_flight):
        """乗員定員は機材から読み取る"""
        flight = create_flight(crew_capacity=4)
        assert flight.crew_capacity == 4

    def test_add_passengers_does_not_reject_over_capacity(self, create_flight):
        """定員チェックは呼び出し側の責務であり、エンティティは拒否しない"""
        flight = create_flight(passenger_capacity=1)
        flight.add_passengers([Passenger("Alice"), Passenger("Bob")])
        assert len(flight.passengers) == 2


class TestScheduledFlightNotification:
    """ScheduledFlight のオブザーバー通知のテスト"""

    def test_add_passengers_notifies_each_observer_once_in_order(
        self, create_flight, create_observer, event_log
    ):
        """全オブザーバーに登録順で 1 回ずつ通知される"""
        # Arrange
        flight = create_flight()
        for name in ("first", "second", "third"):
            flight.add_observer(create_observer(name))

        # Act
        flight.add_passengers([Passenger("Alice"), Passenger("Bob")])

        # Assert
        assert event_log == [
            ("first", "added", 2),
            ("second", "added", 2),
            ("third", "added", 2),
        ]

    def test_mutation_is_applied_before_notification(self, create_flight):
        """通知時点で変更は反映済み"""
        seen: list[int] = []

        class CapturingObserver(FlightObserver):
            def on_passengers_added(self, flight, count):
                seen.append(len(flight.passengers))

            def on_passengers_removed(self, flight, count):
                seen.append(len(flight.passengers))

            def on_price_changed(self, flight, old_price, new_price):
                pass

            def on_flight_cancelled(self, flight):
                pass

        flight = create_flight()
        flight.add_observer(CapturingObserver())

        flight.add_passengers([Passenger("Alice"), Passenger("Bob")])
        flight.remove_passengers([Passenger("Alice")])

        assert seen == [2, 1]

    def test_remove_passengers_counts_only_present_entries(
        self, create_flight, create_observer, event_log
    ):
        """実際に削除された人数だけが通知される"""
        flight = create_flight(passengers=["Alice"])
        flight.add_observer(create_observer())

        flight.remove_passengers([Passenger("Alice"), Passenger("Bob")])

        assert event_log == [("observer", "removed", 1)]
        assert flight.passengers == ()

    def test_remove_absent_passengers_does_not_notify(
        self, create_flight, create_observer, event_log
    ):
        """誰も削除されなければ通知しない"""
        flight = create_flight(passengers=["Alice"])
        flight.add_observer(create_observer())

        flight.remove_passengers([Passenger("Bob"), Passenger("Carol")])

        assert event_log == []
        assert flight.passengers == (Passenger("Alice"),)

    def test_add_no_passengers_does_not_notify(
        self, create_flight, create_observer, event_log
    ):
        """追加人数が 0 なら通知しない"""
        flight = create_flight(passengers=["Alice"])
        flight.add_observer(create_observer())

        flight.add_passengers([])

        assert event_log == []
        assert flight.passengers == (Passenger("Alice"),)

    def test_set_price_notifies_old_and_new_price(
        self, create_flight, create_observer, event_log
    ):
        """運賃変更では旧運賃と新運賃が通知される"""
        flight = create_flight()
        flight.add_observer(create_observer())

        flight.set_price(Money.jpy(250))

        assert flight.current_price == Money.jpy(250)
        assert event_log == [("observer", "price", Money.jpy(100), Money.jpy(250))]

    def test_cancel_marks_cancelled_and_notifies_once(
        self, create_flight, create_observer, event_log
    ):
        """欠航は 1 回だけ通知され、2 回目は何もしない"""
        flight = create_flight()
        flight.add_observer(create_observer())

        flight.cancel()
        flight.cancel()

        assert flight.status == FlightStatus.CANCELLED
        assert event_log == [("observer", "cancelled")]

    def test_cannot_add_passengers_to_cancelled_flight(self, create_flight):
        """欠航便には搭乗者を追加できない"""
        flight = create_flight()
        flight.cancel()

        with pytest.raises(BusinessRuleViolationException):
            flight.add_passengers([Passenger("Alice")])

    def test_removed_observer_is_not_notified(
        self, create_flight, create_observer, event_log
    ):
        """登録解除したオブザーバーには通知されない"""
        flight = create_flight()
        keep = create_observer("keep")
        drop = create_observer("drop")
        flight.add_observer(keep)
        flight.add_observer(drop)

        flight.remove_observer(drop)
        flight.add_passengers([Passenger("Alice")])

        assert event_log == [("keep", "added", 1)]
        assert flight.observers == [keep]

    def test_subscription_handle_detaches_observer(
        self, create_flight, create_observer, event_log
    ):
        """購読ハンドルから登録を解除できる（2 回目の解除は何もしない）"""
        flight = create_flight()
        subscription = flight.add_observer(create_observer())

        subscription.detach()
        subscription.detach()
        flight.add_passengers([Passenger("Alice")])

        assert subscription.is_active is False
        assert event_log == []

    def test_observer_detaching_itself_during_notification(
        self, create_flight, create_observer, event_log
    ):
        """通知中に自身を解除しても、他のオブザーバーへの配信は欠けも重複もしない"""
        flight = create_flight()
        flight.add_observer(create_observer("before"))

        class DetachingObserver(FlightObserver):
            def __init__(self):
                self.subscription = None

            def on_passengers_added(self, flight, count):
                event_log.append(("detaching", "added", count))
                self.subscription.detach()

            def on_passengers_removed(self, flight, count):
                event_log.append(("detaching", "removed", count))

            def on_price_changed(self, flight, old_price, new_price):
                pass

            def on_flight_cancelled(self, flight):
                pass

        detaching = DetachingObserver()
        detaching.subscription = flight.add_observer(detaching)
        flight.add_observer(create_observer("after"))

        flight.add_passengers([Passenger("Alice")])
        flight.add_passengers([Passenger("Bob")])

        assert event_log == [
            ("before", "added", 1),
            ("detaching", "added", 1),
            ("after", "added", 1),
            ("before", "added", 1),
            ("after", "added", 1),
        ]

    def test_observer_registered_during_notification_receives_next_event(
        self, create_flight, create_observer, event_log
    ):
        """通知中に追加されたオブザーバーは、次の変更から通知を受け取る"""
        flight = create_flight()
        late = create_observer("late")

        class RegisteringObserver(FlightObserver):
            def on_passengers_added(self, flight, count):
                event_log.append(("registering", "added", count))
                flight.add_observer(late)

            def on_passengers_removed(self, flight, count):
                pass

            def on_price_changed(self, flight, old_price, new_price):
                event_log.append(("registering", "price"))

            def on_flight_cancelled(self, flight):
                pass

        flight.add_observer(RegisteringObserver())

        flight.add_passengers([Passenger("Alice")])
        flight.set_price(Money.jpy(120))

        assert event_log == [
            ("registering", "added", 1),
            ("registering", "price"),
            ("late", "price", Money.jpy(100), Money.jpy(120)),
        ]
