from typing import Any

from fastapi import APIRouter, Body, Depends, status

from blog_data.deps import post_service
from blog_data.models.post import Post
from blog_data.services.post_service import PostService

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(service: PostService = Depends(post_service)) -> list[Post]:
    return service.get_all()


@router.get("/{post_id}", status_code=status.HTTP_200_OK)
def get_post(post_id: str, service: PostService = Depends(post_service)) -> Post:
    return service.get(post_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    data: Any = Body(default=None), service: PostService = Depends(post_service)
) -> Post:
    return service.create(data)


@router.put("/{post_id}", status_code=status.HTTP_200_OK)
def update_post(
    post_id: str,
    data: Any = Body(default=None),
    service: PostService = Depends(post_service),
) -> Post:
    return service.update(post_id, data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: str, service: PostService = Depends(post_service)):
    service.delete(post_id)
