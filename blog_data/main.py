from contextlib import asynccontextmanager

import uvicorn
from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging.logger import set_package_logger
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
)
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum
from starlette import status
from starlette.exceptions import HTTPException
from starlette.middleware.gzip import GZipMiddleware
from starlette.responses import JSONResponse

from blog_data.api.api import router as api_router
from blog_data.database import Database
from blog_data.middlewares import CorrelationIdMiddleware, UnhandledErrorMiddleware
from blog_data.responses import (
    error_response,
    internal_error_message,
    unavailable_message,
)
from blog_data.settings import Settings

ERROR_MESSAGE_INVALID_BODY = "Invalid request body"

settings = Settings()

if settings.debug:
    set_package_logger()

logger = Logger(utc=True)
metrics = Metrics(namespace=settings.app_name, service=settings.app_name)
metrics.set_default_dimensions(environment=settings.stage)
tracer = Tracer(service=settings.app_name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.database.connect()
    yield
    app.state.database.disconnect()


app = FastAPI(
    debug=settings.debug, title="BlogDataService", version="1.0.0", lifespan=lifespan
)
app.state.database = Database(settings)
app.add_middleware(UnhandledErrorMiddleware, debug=settings.debug)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(GZipMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)

# Lambda connects lazily on the first guarded request and keeps the handle
# for the lifetime of the execution environment.
handler = Mangum(app, lifespan="off")
handler.__name__ = "handler"
handler = tracer.capture_lambda_handler(handler)
handler = logger.inject_lambda_context(handler, clear_state=True, log_event=True)
handler = metrics.log_metrics(handler, capture_cold_start_metric=True)


@app.exception_handler(EndpointConnectionError)
@app.exception_handler(ConnectTimeoutError)
async def connection_error_handler(
    request: Request, error: BotoCoreError
) -> JSONResponse:
    logger.exception(f"Lost connection to DynamoDB path={request.url.path}")
    metrics.add_metric(name="ConnectionErrorHandler", unit=MetricUnit.Count, value=1)
    request.app.state.database.disconnect()
    return error_response(
        request.url.path,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        unavailable_message(request.url.path),
    )


@app.exception_handler(BotoCoreError)
@app.exception_handler(ClientError)
async def botocore_error_handler(
    request: Request, error: BotoCoreError
) -> JSONResponse:
    logger.exception(f"Received botocore error path={request.url.path}")
    metrics.add_metric(name="BotocoreErrorHandler", unit=MetricUnit.Count, value=1)
    return error_response(
        request.url.path,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        internal_error_message(request.url.path, error, settings.debug),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(
    request: Request, error: HTTPException
) -> JSONResponse:
    if error.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Received http exception {error.status_code=} {error.detail=}")
    else:
        logger.info(f"Received http exception {error.status_code=} {error.detail=}")
    metrics.add_metric(name="HttpExceptionHandler", unit=MetricUnit.Count, value=1)
    response = error_response(request.url.path, error.status_code, error.detail)
    if error.headers:
        response.headers.update(error.headers)
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, error: RequestValidationError
) -> JSONResponse:
    logger.warning("Received request validation error", errors=error.errors())
    metrics.add_metric(
        name="RequestValidationErrorHandler", unit=MetricUnit.Count, value=1
    )
    return error_response(
        request.url.path, status.HTTP_400_BAD_REQUEST, ERROR_MESSAGE_INVALID_BODY
    )


if __name__ == "__main__":
    uvicorn.run("blog_data.main:app", host=settings.host, port=settings.port)
