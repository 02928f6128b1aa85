from datetime import datetime, timezone
from http import HTTPStatus

import click
from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cleancharge import __version__
from cleancharge.aggregator import GenerationAggregator
from cleancharge.errors import (
    GenerationError,
    InsufficientData,
    InvalidWindowLength,
    NoDataFound,
    ProviderUnavailable,
)
from cleancharge.models import format_utc

ERROR_STATUS = {
    InvalidWindowLength: HTTPStatus.BAD_REQUEST,
    NoDataFound:         HTTPStatus.INTERNAL_SERVER_ERROR,
    InsufficientData:    HTTPStatus.INTERNAL_SERVER_ERROR,
    ProviderUnavailable: HTTPStatus.SERVICE_UNAVAILABLE,
}


def build_error_response(status: HTTPStatus, message: str, path: str) -> JSONResponse:
    click.echo(f"⚠️  {status.value} {status.name} on {path}: {message}", err=True)
    return JSONResponse(
        status_code=status.value,
        content={
            "timestamp": format_utc(datetime.now(timezone.utc)),
            "status": status.value,
            "errorMessage": status.name,
            "message": message,
            "path": path,
        },
    )


def error_response(error: GenerationError, path: str) -> JSONResponse:
    status = ERROR_STATUS.get(type(error), HTTPStatus.INTERNAL_SERVER_ERROR)
    return build_error_response(status, error.message, path)


def validation_message(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation details into one line, e.g. 'hours: Field required'."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ()) if loc != "query")
        parts.append(f"{field}: {err.get('msg', 'invalid value')}" if field else err.get("msg", "invalid value"))
    return "; ".join(parts) or "Invalid request"


def create_app(aggregator: GenerationAggregator) -> FastAPI:
    app = FastAPI(
        title="cleancharge",
        description=(
            "Forecast clean-energy share of GB electricity generation and the "
            "best time window to charge an electric vehicle."
        ),
        version=__version__,
    )

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        return build_error_response(HTTPStatus.BAD_REQUEST, validation_message(exc), request.url.path)

    @app.get("/api/v1/generation/three-days", tags=["Generation"])
    def three_days(request: Request):
        result = aggregator.three_day_average()
        if not result.ok:
            return error_response(result.error, request.url.path)
        return [summary.to_dict() for summary in result.value]

    @app.get("/api/v1/charge-window", tags=["Charging"])
    def charge_window(request: Request, hours: int = Query(...)):
        """
        hours:
            Charging window length in full hours (1-6).
        """
        result = aggregator.optimal_charging_window(hours)
        if not result.ok:
            return error_response(result.error, request.url.path)
        return result.value.to_dict()

    return app
