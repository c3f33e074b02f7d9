from blog_data.models.post import Post
from blog_data.repositories.post_repository import PostRepository
from blog_data.resources import POSTS
from blog_data.schemas.post_schema import CreatePost, UpdatePost
from blog_data.services.resource_service import ResourceService


class PostService(ResourceService[Post]):
    model = Post
    create_schema = CreatePost
    update_schema = UpdatePost

    def __init__(self, repository: PostRepository):
        super().__init__(POSTS, repository)
