from typing import Any

from boto3.dynamodb.conditions import Key

from blog_data.repositories.document_repository import DocumentRepository


class UserRepository(DocumentRepository):
    EMAIL_INDEX = "EmailIndex"

    def find_by_email(self, email: str) -> list[dict[str, Any]]:
        response = self._table.query(
            IndexName=self.EMAIL_INDEX,
            KeyConditionExpression=Key("email").eq(email),
        )
        return response["Items"]
