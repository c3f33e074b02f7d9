import uuid
from contextvars import ContextVar

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit
from fastapi import status
from fastapi.requests import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from blog_data.responses import error_response, internal_error_message

X_CORRELATION_ID = "X-Correlation-ID"

correlation_id: ContextVar[str] = ContextVar(X_CORRELATION_ID)
logger = Logger(utc=True)
metrics = Metrics()


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        aws_context = request.scope.get("aws.context")
        correlation_id.set(
            request.headers.get(X_CORRELATION_ID)
            or (aws_context.aws_request_id if aws_context else str(uuid.uuid4()))
        )
        logger.set_correlation_id(correlation_id.get())
        response = await call_next(request)
        response.headers[X_CORRELATION_ID] = correlation_id.get()
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns errors no exception handler claimed into a JSON 500.

    Sits inside the correlation id and CORS middlewares so the response
    still carries their headers.
    """

    def __init__(self, app: ASGIApp, debug: bool = False):
        super().__init__(app)
        self._debug = debug

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as error:
            path = request.url.path
            logger.exception(f"Received unhandled error {path=}")
            metrics.add_metric(
                name="UnhandledErrorHandler", unit=MetricUnit.Count, value=1
            )
            return error_response(
                path,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                internal_error_message(path, error, self._debug),
            )
