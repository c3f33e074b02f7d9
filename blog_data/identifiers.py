import re
import uuid

IDENTIFIER_PATTERN = re.compile(r"^[0-9a-fA-F]{32}$")


def new_identifier() -> str:
    return uuid.uuid4().hex


def is_valid_identifier(value: str | None) -> bool:
    """Checks the shape of a document id, independently of whether it exists."""
    return bool(value) and IDENTIFIER_PATTERN.fullmatch(value) is not None
