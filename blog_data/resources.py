from dataclasses import dataclass

DEFAULT_ERROR_KEY = "error"


@dataclass(frozen=True)
class Messages:
    required: str
    invalid_update: str
    invalid_id: str
    not_found: str
    conflict: str | None = None
    unavailable: str = "Database not connected"
    internal: str = "Internal server error"


@dataclass(frozen=True)
class Resource:
    """Describes one collection exposed over HTTP.

    The error key is the name of the single field error bodies are rendered
    with for routes under the resource's prefix.
    """

    name: str
    prefix: str
    error_key: str
    messages: Messages


USERS = Resource(
    name="user",
    prefix="/users",
    error_key="error",
    messages=Messages(
        required="Name and email are required",
        invalid_update="Name and email cannot be empty",
        invalid_id="Invalid user ID format",
        not_found="User not found",
        conflict="Email already exists",
    ),
)

POSTS = Resource(
    name="post",
    prefix="/api/posts",
    error_key="message",
    messages=Messages(
        required="Title, content, and author are required",
        invalid_update="Title, content, and author cannot be empty",
        invalid_id="Invalid post ID format",
        not_found="Post not found",
    ),
)

RESOURCES = (USERS, POSTS)


def resource_for_path(path: str) -> Resource | None:
    for resource in RESOURCES:
        if path == resource.prefix or path.startswith(f"{resource.prefix}/"):
            return resource
    return None


def error_key_for_path(path: str) -> str:
    resource = resource_for_path(path)
    return resource.error_key if resource else DEFAULT_ERROR_KEY
