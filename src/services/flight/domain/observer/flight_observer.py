from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from services.shared.domain import Money

if TYPE_CHECKING:
    from services.flight.domain.entity.scheduled_flight import ScheduledFlight


class FlightObserver(ABC):
    """フライトの状態変化を受け取るオブザーバー

    フライトを所有・制御しない。通知に反応するだけ。
    ログ出力・分析・在庫管理などの関心ごとはこのインターフェースの実装として追加する。
    """

    @abstractmethod
    def on_passengers_added(self, flight: ScheduledFlight, count: int) -> None:
        """搭乗者が追加された"""
        raise NotImplementedError

    @abstractmethod
    def on_passengers_removed(self, flight: ScheduledFlight, count: int) -> None:
        """搭乗者が削除された（count は実際に削除された人数）"""
        raise NotImplementedError

    @abstractmethod
    def on_price_changed(
        self, flight: ScheduledFlight, old_price: Money, new_price: Money
    ) -> None:
        """運賃が変更された"""
        raise NotImplementedError

    @abstractmethod
    def on_flight_cancelled(self, flight: ScheduledFlight) -> None:
        """フライトが欠航になった"""
        raise NotImplementedError
