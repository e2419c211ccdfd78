from enum import Enum


class OrderStatus(str, Enum):
    """注文ステータス"""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
