import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from blog_data.settings import Settings


class Database:
    """Process-wide handle on the DynamoDB tables backing the resources."""

    def __init__(self, settings: Settings):
        self._logger = Logger(utc=True)
        self._settings = settings
        self._resource = None
        self._tables = {}

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def is_connected(self) -> bool:
        return self._resource is not None

    def connect(self) -> bool:
        settings = self._settings
        try:
            resource = boto3.Session(
                aws_access_key_id=settings.aws_access_key_id,
                aws_secret_access_key=settings.aws_secret_access_key,
                region_name=settings.aws_region,
            ).resource("dynamodb", endpoint_url=settings.dynamodb_endpoint_url)
            tables = {}
            for name in (settings.users_table_name, settings.posts_table_name):
                table = resource.Table(name)
                table.load()
                tables[name] = table
        except (BotoCoreError, ClientError):
            self._logger.exception(
                "Could not connect to DynamoDB", region=settings.aws_region
            )
            self.disconnect()
            return False
        self._resource = resource
        self._tables = tables
        self._logger.info(f"Connected to DynamoDB tables={list(tables)}")
        return True

    def disconnect(self):
        self._resource = None
        self._tables = {}

    def table(self, name: str):
        if not self.is_connected:
            raise RuntimeError("Database is not connected")
        return self._tables[name]
