from blog_data.models.camel_model import CamelModel


class User(CamelModel):
    id: str
    name: str
    email: str
    created_at: str
    updated_at: str
