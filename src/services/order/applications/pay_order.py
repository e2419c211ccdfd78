from aws_lambda_powertools import Logger

from services.order.domain.entity import FlightOrder
from services.payment.domain.factory import (
    CreditCardDetails,
    PaymentStrategyFactory,
    PayPalDetails,
)
from services.shared.domain.exception import PaymentRejectedException

logger = Logger()


class PayOrderService:
    """注文決済ユースケース

    入力から決済戦略を組み立て、注文処理パイプラインで決済する。
    例外は握りつぶさず呼び出し元へ伝播する。リトライもしない。
    """

    def __init__(self, strategy_factory: PaymentStrategyFactory) -> None:
        self._strategy_factory = strategy_factory

    def pay(
        self,
        order: FlightOrder,
        payment_details: CreditCardDetails | PayPalDetails | dict,
    ) -> bool:
        """注文を決済する

        Args:
            order: 決済対象の注文
            payment_details: 決済手段の入力（検証済みモデル、または生の dict）

        Returns:
            bool: 決済に成功した（またはクローズ済みだった）場合 True
        """
        if isinstance(payment_details, dict):
            strategy = self._strategy_factory.create_from_payload(payment_details)
        else:
            strategy = self._strategy_factory.create(payment_details)

        logger.info(
            "Processing order payment",
            extra={"order_id": str(order.id), "payment_method": strategy.name},
        )

        try:
            return order.process_payment_with_chain(strategy)
        except PaymentRejectedException as e:
            logger.warning(
                "Payment rejected",
                extra={"order_id": str(order.id), "reason": e.reason.value},
            )
            raise
