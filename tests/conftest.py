import os

import boto3
import pendulum
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws
from pytest_mock import MockerFixture

from blog_data.database import Database
from blog_data.identifiers import new_identifier
from blog_data.models.post import Post
from blog_data.models.user import User
from blog_data.settings import Settings


def pytest_configure():
    os.environ.setdefault("STAGE", "test")
    os.environ.setdefault("AWS_DEFAULT_REGION", "eu-central-1")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def dynamodb_resource(settings: Settings):
    with mock_aws():
        yield boto3.Session().resource(
            "dynamodb",
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )


@pytest.fixture
def users_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.create_table(
        AttributeDefinitions=[
            {
                "AttributeName": "id",
                "AttributeType": "S",
            },
            {
                "AttributeName": "email",
                "AttributeType": "S",
            },
        ],
        TableName=settings.users_table_name,
        KeySchema=[
            {"AttributeName": "id", "KeyType": "HASH"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": "EmailIndex",
                "KeySchema": [
                    {
                        "AttributeName": "email",
                        "KeyType": "HASH",
                    },
                ],
                "Projection": {
                    "ProjectionType": "ALL",
                },
                "ProvisionedThroughput": {
                    "ReadCapacityUnits": 10,
                    "WriteCapacityUnits": 10,
                },
            },
        ],
        ProvisionedThroughput={"ReadCapacityUnits": 10, "WriteCapacityUnits": 10},
    )


@pytest.fixture
def posts_table(dynamodb_resource, settings: Settings):
    return dynamodb_resource.create_table(
        AttributeDefinitions=[
            {
                "AttributeName": "id",
                "AttributeType": "S",
            },
        ],
        TableName=settings.posts_table_name,
        KeySchema=[
            {"AttributeName": "id", "KeyType": "HASH"},
        ],
        ProvisionedThroughput={"ReadCapacityUnits": 10, "WriteCapacityUnits": 10},
    )


@pytest.fixture
def database(settings: Settings, users_table, posts_table) -> Database:
    database = Database(settings)
    database.connect()
    yield database
    database.disconnect()


@pytest.fixture
def disconnected_database(settings: Settings) -> Database:
    return Database(settings)


@pytest.fixture
def make_user(faker):
    def make(minutes_ago: int = 0) -> User:
        created_at = pendulum.now("UTC").subtract(minutes=minutes_ago)
        return User(
            id=new_identifier(),
            name=faker.name(),
            email=faker.unique.email(),
            created_at=created_at.to_iso8601_string(),
            updated_at=created_at.to_iso8601_string(),
        )

    return make


@pytest.fixture
def make_post(faker):
    def make(minutes_ago: int = 0) -> Post:
        created_at = pendulum.now("UTC").subtract(minutes=minutes_ago)
        return Post(
            id=new_identifier(),
            title=faker.sentence(),
            content=faker.text(),
            author=faker.name(),
            created_at=created_at.to_iso8601_string(),
            updated_at=created_at.to_iso8601_string(),
        )

    return make


@pytest.fixture
def users(make_user, users_table) -> list[User]:
    users = [make_user(minutes_ago=index + 1) for index in range(5)]
    with users_table.batch_writer() as batch:
        for user in users:
            batch.put_item(Item=user.model_dump())
    return users


@pytest.fixture
def posts(make_post, posts_table) -> list[Post]:
    posts = [make_post(minutes_ago=index + 1) for index in range(5)]
    with posts_table.batch_writer() as batch:
        for post in posts:
            batch.put_item(Item=post.model_dump())
    return posts


@pytest.fixture
def app_with_database():
    from blog_data.main import app

    original = app.state.database

    def attach(database: Database):
        app.state.database = database
        return app

    yield attach
    app.state.database = original


@pytest.fixture
def test_client(app_with_database, database: Database) -> TestClient:
    return TestClient(app_with_database(database), raise_server_exceptions=True)


@pytest.fixture
def disconnected_client(
    app_with_database, disconnected_database: Database, mocker: MockerFixture
) -> TestClient:
    mocker.patch.object(disconnected_database, "connect", return_value=False)
    return TestClient(
        app_with_database(disconnected_database), raise_server_exceptions=True
    )
