"""注文処理パイプラインのステージ

各ステージは OrderContext を受け取り、後続ステージへ進むかどうかを bool で返す。
"""

from typing import Callable

from aws_lambda_powertools import Logger

from services.order.domain.event import OrderConfirmed
from services.shared.domain.exception import (
    ConfigurationException,
    PaymentRejectedException,
    PaymentRejectionReason,
    PipelineInputException,
)

from .order_context import OrderContext

logger = Logger()

OrderStage = Callable[[OrderContext], bool]


def validate_order(context: OrderContext | None) -> bool:
    """検証ステージ

    - 注文がクローズ済みなら成功として以降をスキップする（二重決済しない）
    - 決済戦略が未設定、または決済情報が不正なら例外
    """
    if context is None or context.order is None:
        raise PipelineInputException("Order context is missing.")

    if context.order.is_closed:
        context.success = True
        return False

    if context.payment_strategy is None:
        raise ConfigurationException("No payment strategy has been set.")

    if not context.payment_strategy.validate():
        raise PaymentRejectedException(
            "Payment information is not valid.",
            reason=PaymentRejectionReason.INVALID_CREDENTIAL,
        )

    return True


def charge_payment(context: OrderContext) -> bool:
    """決済ステージ: 決済に成功した場合のみ後続へ進む"""
    is_paid = context.payment_strategy.pay(context.order.price)
    context.success = is_paid
    return is_paid


def close_order(context: OrderContext) -> bool:
    """クローズステージ: 決済成功時に注文をクローズする"""
    if context.success:
        context.order.close()
    return context.success


def confirm_order(context: OrderContext) -> bool:
    """確定ステージ: 確定記録を残す（成功フラグは変更しない）"""
    if context.success:
        order = context.order
        event = OrderConfirmed(
            order_id=str(order.id),
            customer_name=order.customer.name,
            amount=str(order.price.amount),
            currency=str(order.price.currency),
            payment_method=context.payment_strategy.name,
            flight_numbers=[str(flight.flight_number) for flight in order.flights],
        )
        order.add_domain_event(event)
        logger.info(
            f"Order {order.id} processed successfully.", extra=event.model_dump()
        )
    return context.success
