from pydantic import BaseModel, ConfigDict


class OrderConfirmed(BaseModel):
    """注文確定の記録（ドメインイベント）"""

    model_config = ConfigDict(frozen=True)

    order_id: str
    customer_name: str
    amount: str
    currency: str
    payment_method: str
    flight_numbers: list[str]
