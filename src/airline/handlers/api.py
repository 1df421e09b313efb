from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from airline.app_context import AppContext
from airline.booking.handlers.routes import router as booking_router
from airline.flight.handlers.routes import router as flight_router
from airline.shared.domain.exception import (
    BusinessRuleViolationException,
    DownstreamFailureException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from airline.shared.settings import Settings
from airline.shared.utils import api_response, error_response

logger = Logger()

app = APIGatewayHttpResolver()
app.include_router(flight_router)
app.include_router(booking_router)

app_context = AppContext.create(Settings.from_env())


@app.get("/health")
def health():
    return api_response(200, {"status": "Healthy"})


@app.get("/ready")
def ready():
    return api_response(200, {"status": "Ready"})


@app.exception_handler(ResourceNotFoundException)
def handle_not_found(e: ResourceNotFoundException):
    return error_response(404, str(e))


@app.exception_handler(BusinessRuleViolationException)
def handle_business_rule_violation(e: BusinessRuleViolationException):
    return error_response(409, str(e))


@app.exception_handler(OptimisticLockException)
def handle_conflict(e: OptimisticLockException):
    return error_response(409, str(e))


@app.exception_handler(DownstreamFailureException)
def handle_downstream_failure(e: DownstreamFailureException):
    return error_response(500, str(e))


@app.exception_handler(ValidationError)
def handle_validation_error(e: ValidationError):
    logger.warning("Invalid request", extra={"errors": e.error_count()})
    details = e.errors(include_url=False, include_context=False, include_input=False)
    return error_response(400, "Invalid request.", details=details)


@app.not_found
def handle_route_not_found(e: NotFoundError):
    return error_response(404, "Not found.")


@app.exception_handler(Exception)
def handle_unexpected_error(e: Exception):
    logger.exception("Unexpected error while processing request")
    return error_response(500, "Internal server error")


def resolve(event: dict, context: LambdaContext, ctx: AppContext) -> dict:
    """指定した AppContext でリクエストを処理する"""
    app.append_context(app_context=ctx)
    return app.resolve(event, context)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約サービス Lambda Handler

    API Gateway HTTP API からの全リクエストを 1 つの関数で受け、
    プロセス内のストアを共有する。
    """
    return resolve(event, context, app_context)
