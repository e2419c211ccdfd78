import os

import boto3

from services.payment.domain.repository import CredentialDirectory


class DynamoDBCredentialDirectory(CredentialDirectory):
    """DynamoDBを使用したCredentialDirectory の具象実装

    PK: ACCOUNT#<identifier> / SK: CREDENTIAL
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_secret(self, identifier: str) -> str | None:
        """識別子に対応するシークレットを取得する"""
        response = self.table.get_item(
            Key={"PK": f"ACCOUNT#{identifier}", "SK": "CREDENTIAL"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return item.get("secret")
