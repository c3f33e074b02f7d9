from starlette.responses import JSONResponse

from blog_data.resources import error_key_for_path, resource_for_path

ERROR_MESSAGE_INTERNAL = "Internal server error"
ERROR_MESSAGE_UNAVAILABLE = "Database not connected"


def error_response(path: str, status_code: int, message: str) -> JSONResponse:
    """Renders an error in the body shape of the resource owning ``path``."""
    return JSONResponse(
        content={error_key_for_path(path): message}, status_code=status_code
    )


def internal_error_message(path: str, error: Exception, debug: bool = False) -> str:
    if debug:
        return str(error)
    resource = resource_for_path(path)
    return resource.messages.internal if resource else ERROR_MESSAGE_INTERNAL


def unavailable_message(path: str) -> str:
    resource = resource_for_path(path)
    return resource.messages.unavailable if resource else ERROR_MESSAGE_UNAVAILABLE
