from blog_data.models.camel_model import CamelModel


class Post(CamelModel):
    id: str
    title: str
    content: str
    author: str
    created_at: str
    updated_at: str
