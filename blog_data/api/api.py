from fastapi import APIRouter

from blog_data.api.routers import health_router, posts_router, users_router
from blog_data.resources import POSTS, USERS

router = APIRouter()
router.include_router(health_router.router, tags=["health"])
router.include_router(users_router.router, prefix=USERS.prefix, tags=["users"])
router.include_router(posts_router.router, prefix=POSTS.prefix, tags=["posts"])
