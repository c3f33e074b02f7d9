from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def _is_conditional_check_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED


class DocumentRepository:
    """Single-table CRUD keyed by the ``id`` attribute."""

    def __init__(self, table):
        self._logger = Logger(utc=True)
        self._table = table

    def create(self, item: dict[str, Any]):
        self._table.put_item(
            Item=item, ConditionExpression=Attr("id").not_exists()
        )

    def get_all(self) -> list[dict[str, Any]]:
        items = []
        response = self._table.scan()
        items.extend(response["Items"])
        while "LastEvaluatedKey" in response:
            response = self._table.scan(
                ExclusiveStartKey=response["LastEvaluatedKey"]
            )
            items.extend(response["Items"])
        return items

    def get_by_id(self, item_id: str) -> dict[str, Any] | None:
        response = self._table.get_item(Key={"id": item_id})
        return response.get("Item")

    def update(self, item_id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        attr_names = {f"#{k}": k for k in data}
        attr_values = {f":{k}": v for k, v in data.items()}
        update_expr = ", ".join(f"#{k}=:{k}" for k in data)
        try:
            response = self._table.update_item(
                Key={"id": item_id},
                ConditionExpression=Attr("id").exists(),
                UpdateExpression=f"SET {update_expr}",
                ExpressionAttributeNames=attr_names,
                ExpressionAttributeValues=attr_values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as error:
            if _is_conditional_check_failure(error):
                return None
            raise
        return response["Attributes"]

    def delete(self, item_id: str) -> bool:
        try:
            self._table.delete_item(
                Key={"id": item_id}, ConditionExpression=Attr("id").exists()
            )
        except ClientError as error:
            if _is_conditional_check_failure(error):
                return False
            raise
        return True
