from typing import Any, Generic, TypeVar

import pendulum
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from blog_data.exceptions import (
    InvalidIdentifierException,
    NotFoundException,
    ValidationException,
)
from blog_data.identifiers import is_valid_identifier, new_identifier
from blog_data.models.camel_model import CamelModel
from blog_data.repositories.document_repository import DocumentRepository
from blog_data.resources import Resource

ModelT = TypeVar("ModelT", bound=CamelModel)


class ResourceService(Generic[ModelT]):
    """CRUD over one collection.

    Subclasses bind the record model and the create/update schemas, and may
    hook into create and update to enforce extra rules before the write.
    """

    model: type[ModelT]
    create_schema: type[CamelModel]
    update_schema: type[CamelModel]

    def __init__(self, resource: Resource, repository: DocumentRepository):
        self._logger = Logger(utc=True)
        self._resource = resource
        self._repo = repository

    @property
    def messages(self):
        return self._resource.messages

    def _check_identifier(self, item_id: str) -> str:
        if not is_valid_identifier(item_id):
            self._logger.warning(f"Invalid {self._resource.name} id: {item_id=}")
            raise InvalidIdentifierException(self.messages.invalid_id)
        return item_id.lower()

    def _validate(
        self, schema: type[CamelModel], data: Any, message: str
    ) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise ValidationException(message)
        try:
            return schema.model_validate(data).model_dump(exclude_none=True)
        except ValidationError as error:
            self._logger.warning(
                f"Invalid {self._resource.name} payload",
                errors=error.errors(include_url=False, include_input=False),
            )
            raise ValidationException(message) from error

    def _before_create(self, data: dict[str, Any]):
        pass

    def _before_update(
        self, item_id: str, current: dict[str, Any], data: dict[str, Any]
    ):
        pass

    def get_all(self) -> list[ModelT]:
        items = self._repo.get_all()
        items.sort(key=lambda item: pendulum.parse(item["created_at"]), reverse=True)
        return [self.model(**item) for item in items]

    def get(self, item_id: str) -> ModelT:
        item_id = self._check_identifier(item_id)
        item = self._repo.get_by_id(item_id)
        if not item:
            self._logger.warning(f"{self._resource.name} not found: {item_id=}")
            raise NotFoundException(self.messages.not_found)
        return self.model(**item)

    def create(self, data: Any) -> ModelT:
        fields = self._validate(self.create_schema, data, self.messages.required)
        self._before_create(fields)
        now = pendulum.now("UTC").to_iso8601_string()
        fields.update({"id": new_identifier(), "created_at": now, "updated_at": now})
        self._repo.create(fields)
        self._logger.info(f"{self._resource.name} created: id={fields['id']}")
        return self.model(**fields)

    def update(self, item_id: str, data: Any) -> ModelT:
        item_id = self._check_identifier(item_id)
        fields = self._validate(self.update_schema, data, self.messages.invalid_update)
        current = self._repo.get_by_id(item_id)
        if not current:
            self._logger.warning(f"{self._resource.name} not found: {item_id=}")
            raise NotFoundException(self.messages.not_found)
        self._before_update(item_id, current, fields)
        now = pendulum.now("UTC")
        created_at = pendulum.parse(current["created_at"])
        fields["updated_at"] = max(now, created_at).to_iso8601_string()
        item = self._repo.update(item_id, fields)
        if not item:
            self._logger.warning(f"{self._resource.name} vanished: {item_id=}")
            raise NotFoundException(self.messages.not_found)
        self._logger.info(f"{self._resource.name} updated: {item_id=}")
        return self.model(**item)

    def delete(self, item_id: str):
        item_id = self._check_identifier(item_id)
        if not self._repo.delete(item_id):
            self._logger.warning(f"{self._resource.name} not found: {item_id=}")
            raise NotFoundException(self.messages.not_found)
        self._logger.info(f"{self._resource.name} deleted: {item_id=}")
