import threading
from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - 整合性の境界 = 集約境界 = 排他制御の単位
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list = []
        # 同一集約に対する状態遷移を直列化する（再入可能）
        self._lock = threading.RLock()

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list:
        """蓄積したドメインイベントを返し、クリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
