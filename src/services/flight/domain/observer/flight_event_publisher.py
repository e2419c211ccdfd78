from __future__ import annotations

import itertools
import threading
from typing import Callable

from .flight_observer import FlightObserver


class Subscription:
    """購読ハンドル

    オブザーバー自身が購読解除の方法を知らなくても、
    ハンドルの detach() で登録を外せる。
    """

    def __init__(self, publisher: FlightEventPublisher, token: int) -> None:
        self._publisher = publisher
        self._token = token

    @property
    def token(self) -> int:
        return self._token

    @property
    def is_active(self) -> bool:
        return self._publisher.is_subscribed(self._token)

    def detach(self) -> None:
        """購読を解除する（解除済みなら何もしない）"""
        self._publisher.unsubscribe(self._token)


class FlightEventPublisher:
    """フライトイベントの配信

    - 購読は登録順に保持し、登録順に配信する
    - 配信時点の購読一覧のスナップショットに対して配信するため、
      コールバック内での購読・解除は進行中の配信に影響しない
    """

    def __init__(self) -> None:
        self._subscriptions: dict[int, FlightObserver] = {}
        self._tokens = itertools.count(1)
        self._lock = threading.Lock()

    def subscribe(self, observer: FlightObserver) -> Subscription:
        with self._lock:
            token = next(self._tokens)
            self._subscriptions[token] = observer
        return Subscription(self, token)

    def unsubscribe(self, token: int) -> None:
        with self._lock:
            self._subscriptions.pop(token, None)

    def unsubscribe_observer(self, observer: FlightObserver) -> int:
        """指定オブザーバーの購読を全て解除し、解除した件数を返す"""
        with self._lock:
            tokens = [t for t, o in self._subscriptions.items() if o is observer]
            for token in tokens:
                del self._subscriptions[token]
        return len(tokens)

    def is_subscribed(self, token: int) -> bool:
        with self._lock:
            return token in self._subscriptions

    @property
    def observers(self) -> list[FlightObserver]:
        return self._snapshot()

    def publish(self, deliver: Callable[[FlightObserver], None]) -> None:
        """スナップショット上の各オブザーバーへ同期的に配信する

        オブザーバーが送出した例外はそのまま呼び出し元へ伝播する。
        """
        for observer in self._snapshot():
            deliver(observer)

    def _snapshot(self) -> list[FlightObserver]:
        with self._lock:
            return list(self._subscriptions.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)
