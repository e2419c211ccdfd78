from __future__ import annotations

from collections.abc import Sequence

from .order_context import OrderContext
from .stages import (
    OrderStage,
    charge_payment,
    close_order,
    confirm_order,
    validate_order,
)


class OrderProcessingPipeline:
    """注文処理パイプライン

    ステージを先頭から順に実行し、False を返したステージで打ち切る。
    結果は常にコンテキストの成功フラグから読む（最後のステージの戻り値ではない）。
    ステージ構成は生成時に固定され、後から組み替えられない。
    """

    def __init__(self, stages: Sequence[OrderStage]) -> None:
        if not stages:
            raise ValueError("Pipeline requires at least one stage")
        self._stages: tuple[OrderStage, ...] = tuple(stages)

    @classmethod
    def default(cls) -> OrderProcessingPipeline:
        """検証 → 決済 → クローズ → 確定"""
        return cls((validate_order, charge_payment, close_order, confirm_order))

    @classmethod
    def single_call(cls) -> OrderProcessingPipeline:
        """検証 → 決済 → クローズ（確定記録なし）"""
        return cls((validate_order, charge_payment, close_order))

    @property
    def stages(self) -> tuple[OrderStage, ...]:
        return self._stages

    def run(self, context: OrderContext | None) -> bool:
        for stage in self._stages:
            if not stage(context):
                break
        return context is not None and context.success
