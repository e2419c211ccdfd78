from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    """注文ID

    例: "order_3f2b..."
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("OrderId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> OrderId:
        """新しい OrderId を採番する"""
        return cls(value=f"order_{uuid.uuid4().hex}")
