from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator


class CreditCardDetails(BaseModel):
    """クレジットカード決済の入力スキーマ"""

    method: Literal["credit_card"] = "credit_card"
    number: str = Field(
        ...,
        pattern=r"^\d{13,19}$",
        description="カード番号（スペース・ハイフンは除去される）",
        examples=["4111111111111111"],
    )
    expiration_date: date = Field(
        ...,
        description="有効期限（月末まで有効）",
        examples=["2030-12-01"],
    )
    cvv: str = Field(..., pattern=r"^\d{3,4}$", repr=False)

    @field_validator("number", mode="before")
    @classmethod
    def strip_separators(cls, v: object) -> object:
        if isinstance(v, str):
            return v.replace(" ", "").replace("-", "")
        return v


class PayPalDetails(BaseModel):
    """PayPal 決済の入力スキーマ"""

    method: Literal["paypal"] = "paypal"
    email: str = Field(
        ...,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="PayPal アカウントのメールアドレス",
        examples=["traveler@example.com"],
    )
    password: str = Field(..., min_length=1, repr=False)


PaymentMethodDetails = Annotated[
    CreditCardDetails | PayPalDetails, Field(discriminator="method")
]
