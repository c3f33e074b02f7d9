from typing import Any

from fastapi import APIRouter, Body, Depends, status

from blog_data.deps import user_service
from blog_data.models.user import User
from blog_data.services.user_service import UserService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_users(service: UserService = Depends(user_service)) -> list[User]:
    return service.get_all()


@router.get("/{user_id}", status_code=status.HTTP_200_OK)
def get_user(user_id: str, service: UserService = Depends(user_service)) -> User:
    return service.get(user_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    data: Any = Body(default=None), service: UserService = Depends(user_service)
) -> User:
    return service.create(data)


@router.put("/{user_id}", status_code=status.HTTP_200_OK)
def update_user(
    user_id: str,
    data: Any = Body(default=None),
    service: UserService = Depends(user_service),
) -> User:
    return service.update(user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(user_service)):
    service.delete(user_id)
