from pydantic import ConfigDict, constr

from blog_data.models.camel_model import CamelModel


class CreateUser(CamelModel):
    name: constr(strip_whitespace=True, min_length=1)
    email: constr(strip_whitespace=True, min_length=1)

    model_config = ConfigDict(extra="ignore")


class UpdateUser(CamelModel):
    name: constr(strip_whitespace=True, min_length=1) | None = None
    email: constr(strip_whitespace=True, min_length=1) | None = None

    model_config = ConfigDict(extra="ignore")
