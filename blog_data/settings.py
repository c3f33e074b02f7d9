from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    debug: bool = False
    app_name: str = "blog-data-service"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_region: str = Field(alias="AWS_DEFAULT_REGION")
    cors_origins: list[str] = ["*"]
    dynamodb_endpoint_url: str | None = None
    host: str = "0.0.0.0"
    port: int = 8080
    stage: str

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    @computed_field
    @property
    def users_table_name(self) -> str:
        return f"{self.stage}-users"

    @computed_field
    @property
    def posts_table_name(self) -> str:
        return f"{self.stage}-posts"
