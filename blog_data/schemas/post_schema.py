from pydantic import ConfigDict, constr

from blog_data.models.camel_model import CamelModel


class CreatePost(CamelModel):
    title: constr(strip_whitespace=True, min_length=1)
    content: constr(strip_whitespace=True, min_length=1)
    author: constr(strip_whitespace=True, min_length=1)

    model_config = ConfigDict(extra="ignore")


class UpdatePost(CamelModel):
    title: constr(strip_whitespace=True, min_length=1) | None = None
    content: constr(strip_whitespace=True, min_length=1) | None = None
    author: constr(strip_whitespace=True, min_length=1) | None = None

    model_config = ConfigDict(extra="ignore")
