from __future__ import annotations

from collections.abc import Sequence

from aws_lambda_powertools import Logger

from services.flight.domain.entity import ScheduledFlight
from services.flight.domain.value_object import Passenger
from services.order.domain.enum import OrderStatus
from services.order.domain.pipeline import OrderContext, OrderProcessingPipeline
from services.order.domain.value_object import Customer, OrderId
from services.payment.domain.strategy import PaymentStrategy
from services.shared.domain import AggregateRoot, Money
from services.shared.domain.exception import BusinessRuleViolationException

logger = Logger()


class FlightOrder(AggregateRoot[OrderId]):
    """フライト注文（集約ルート）

    1 つ以上のフライトにまたがる購入記録で、決済のライフサイクルは 1 つ。
    クローズ後は決済を再実行しない（再度の処理は決済戦略を呼ばずに成功を返す）。

    決済処理は注文ごとのロックで直列化され、並行に呼ばれても
    決済の副作用は高々 1 回。
    """

    def __init__(
        self,
        id: OrderId,
        customer: Customer,
        passengers: Sequence[Passenger],
        flights: Sequence[ScheduledFlight],
        price: Money,
        status: OrderStatus = OrderStatus.OPEN,
        pipeline: OrderProcessingPipeline | None = None,
    ) -> None:
        super().__init__(id)

        if not flights:
            raise BusinessRuleViolationException(
                "An order must contain at least one flight"
            )

        self._customer = customer
        self._passengers = tuple(passengers)
        self._flights = tuple(flights)
        self._price = price
        self._status = status
        self._payment_strategy: PaymentStrategy | None = None

        # ステージ構成は生成時に一度だけ組み立てる
        self._pipeline = pipeline or OrderProcessingPipeline.default()
        self._single_call_pipeline = OrderProcessingPipeline.single_call()

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def flights(self) -> tuple[ScheduledFlight, ...]:
        return self._flights

    @property
    def price(self) -> Money:
        return self._price

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def is_closed(self) -> bool:
        return self._status == OrderStatus.CLOSED

    @property
    def payment_strategy(self) -> PaymentStrategy | None:
        return self._payment_strategy

    def set_payment_strategy(self, payment_strategy: PaymentStrategy) -> None:
        """決済戦略を設定する（設定済みのものは破棄される）"""
        with self._lock:
            self._payment_strategy = payment_strategy

    def close(self) -> None:
        """注文をクローズする（クローズ済みなら何もしない）"""
        with self._lock:
            if self.is_closed:
                return
            self._status = OrderStatus.CLOSED
            logger.info("Order closed", extra={"order_id": str(self.id)})

    def process_payment(self) -> bool:
        """設定済みの決済戦略で決済する

        検証・決済・クローズを 1 回の呼び出しで行う。
        チェーン版（process_payment_with_chain）と同じステージを使うため、
        同じ入力に対する注文の状態遷移は両者で一致する。

        Returns:
            bool: 決済に成功した（またはクローズ済みだった）場合 True

        Raises:
            ConfigurationException: 決済戦略が未設定
            PaymentRejectedException: 決済情報の不備、または残高不足
        """
        with self._lock:
            context = OrderContext(self, self._payment_strategy)
            return self._single_call_pipeline.run(context)

    def process_payment_with_chain(
        self, payment_strategy: PaymentStrategy | None = None
    ) -> bool:
        """注文処理パイプライン（検証 → 決済 → クローズ → 確定）で決済する

        payment_strategy を渡した場合は先に設定してから処理する。
        """
        with self._lock:
            if payment_strategy is not None:
                self.set_payment_strategy(payment_strategy)
            context = OrderContext(self, self._payment_strategy)
            return self._pipeline.run(context)
