from __future__ import annotations

from typing import TYPE_CHECKING

from services.shared.domain.exception import BusinessRuleViolationException

if TYPE_CHECKING:
    from services.order.domain.entity.flight_order import FlightOrder
    from services.payment.domain.strategy import PaymentStrategy


class OrderContext:
    """注文処理 1 回分のコンテキスト

    注文と決済戦略は借用するだけで所有しない。
    決済戦略は生成時点のものを固定し、処理中に注文側で差し替えられても影響しない。
    成功フラグは一度 True になったら False に戻せない。
    """

    def __init__(
        self,
        order: FlightOrder | None,
        payment_strategy: PaymentStrategy | None,
    ) -> None:
        self._order = order
        self._payment_strategy = payment_strategy
        self._success = False

    @property
    def order(self) -> FlightOrder | None:
        return self._order

    @property
    def payment_strategy(self) -> PaymentStrategy | None:
        return self._payment_strategy

    @property
    def success(self) -> bool:
        return self._success

    @success.setter
    def success(self, value: bool) -> None:
        if self._success and not value:
            raise BusinessRuleViolationException(
                "A successful order context cannot be marked as failed"
            )
        self._success = value
