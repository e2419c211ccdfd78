import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.payment.domain.repository import BalanceLedger
from services.shared.domain import Currency, Money
from services.shared.domain.exception import OptimisticLockException


class DynamoDBBalanceLedger(BalanceLedger):
    """DynamoDBを使用したBalanceLedger の具象実装

    PK: INSTRUMENT#<instrument_id> / SK: BALANCE
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def balance_of(self, instrument_id: str) -> Money | None:
        """現在の残高を取得する"""
        response = self.table.get_item(
            Key=self._key(instrument_id),
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return Money(
            amount=Decimal(str(item["amount"])),
            currency=Currency(item["currency"]),
        )

    def update_balance(
        self,
        instrument_id: str,
        balance: Money,
        expected_balance: Money | None = None,
    ) -> None:
        """残高を更新する"""
        kwargs: dict = {
            "Key": self._key(instrument_id),
            "UpdateExpression": "SET #amount = :amount, #currency = :currency",
            "ExpressionAttributeNames": {"#amount": "amount", "#currency": "currency"},
            "ExpressionAttributeValues": {
                ":amount": str(balance.amount),
                ":currency": str(balance.currency),
            },
        }

        if expected_balance is not None:
            kwargs["ConditionExpression"] = Attr("amount").eq(
                str(expected_balance.amount)
            ) & Attr("currency").eq(str(expected_balance.currency))

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Balance conflict: "
                    f"expected {expected_balance}, "
                    f"instrument={instrument_id[-4:]}"
                )
            raise

    @staticmethod
    def _key(instrument_id: str) -> dict:
        return {"PK": f"INSTRUMENT#{instrument_id}", "SK": "BALANCE"}
