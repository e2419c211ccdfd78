from __future__ import annotations

from aws_lambda_powertools import Logger

from services.flight.domain.entity import ScheduledFlight
from services.flight.domain.observer import FlightObserver
from services.shared.domain import Money

logger = Logger()


class LoggingFlightObserver(FlightObserver):
    """フライトの状態変化を構造化ログとして出力するオブザーバー"""

    def __init__(self, logger: Logger = logger) -> None:
        self._logger = logger

    def on_passengers_added(self, flight: ScheduledFlight, count: int) -> None:
        self._logger.info(
            f"{count} passengers added to flight {flight}",
            extra={
                "flight_number": str(flight.flight_number),
                "count": count,
                "available_capacity": flight.available_capacity,
            },
        )

    def on_passengers_removed(self, flight: ScheduledFlight, count: int) -> None:
        self._logger.info(
            f"{count} passengers removed from flight {flight}",
            extra={
                "flight_number": str(flight.flight_number),
                "count": count,
                "available_capacity": flight.available_capacity,
            },
        )

    def on_price_changed(
        self, flight: ScheduledFlight, old_price: Money, new_price: Money
    ) -> None:
        self._logger.info(
            f"Price changed from {old_price} to {new_price} for flight {flight}",
            extra={
                "flight_number": str(flight.flight_number),
                "old_price": str(old_price),
                "new_price": str(new_price),
            },
        )

    def on_flight_cancelled(self, flight: ScheduledFlight) -> None:
        self._logger.warning(
            f"Flight cancelled: {flight}",
            extra={"flight_number": str(flight.flight_number)},
        )
