from aws_lambda_powertools import Logger
from fastapi import Depends, Request

from blog_data.database import Database
from blog_data.exceptions import ServiceUnavailableException
from blog_data.repositories.post_repository import PostRepository
from blog_data.repositories.user_repository import UserRepository
from blog_data.responses import unavailable_message
from blog_data.services.post_service import PostService
from blog_data.services.user_service import UserService

logger = Logger(utc=True)


def get_database(request: Request) -> Database:
    return request.app.state.database


def require_database(
    request: Request, database: Database = Depends(get_database)
) -> Database:
    if not database.is_connected and not database.connect():
        logger.warning(f"Database is not connected, rejecting {request.url.path}")
        raise ServiceUnavailableException(unavailable_message(request.url.path))
    return database


def user_service(database: Database = Depends(require_database)) -> UserService:
    settings = database.settings
    return UserService(UserRepository(database.table(settings.users_table_name)))


def post_service(database: Database = Depends(require_database)) -> PostService:
    settings = database.settings
    return PostService(PostRepository(database.table(settings.posts_table_name)))
