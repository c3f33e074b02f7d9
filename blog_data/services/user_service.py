from typing import Any

from blog_data.exceptions import ConflictException
from blog_data.models.user import User
from blog_data.repositories.user_repository import UserRepository
from blog_data.resources import USERS
from blog_data.schemas.user_schema import CreateUser, UpdateUser
from blog_data.services.resource_service import ResourceService


class UserService(ResourceService[User]):
    model = User
    create_schema = CreateUser
    update_schema = UpdateUser

    def __init__(self, repository: UserRepository):
        super().__init__(USERS, repository)

    def _ensure_email_available(self, email: str, user_id: str | None = None):
        owners = [
            item for item in self._repo.find_by_email(email) if item["id"] != user_id
        ]
        if owners:
            self._logger.warning(f"Email already in use: {email=}")
            raise ConflictException(self.messages.conflict)

    def _before_create(self, data: dict[str, Any]):
        self._ensure_email_available(data["email"])

    def _before_update(
        self, item_id: str, current: dict[str, Any], data: dict[str, Any]
    ):
        if "email" in data and data["email"] != current.get("email"):
            self._ensure_email_available(data["email"], item_id)
