# bloom_api/core/errors.py
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BloomDataError(Exception):
    """Request rejected before any data is generated. Rendered as {"error": message}."""

    status_code = 400
    message = "Invalid request."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingParameter(BloomDataError):
    message = "Missing required query parameters. Required: lat, lon, radius, startDate, endDate."


class InvalidNumber(BloomDataError):
    message = "Invalid geographic parameters. lat, lon, and radius must be numbers."


class InvalidDate(BloomDataError):
    message = "Invalid date parameters. startDate and endDate must be dates in YYYY-MM-DD format."


class InvalidRange(BloomDataError):
    message = "Invalid date range. startDate must be on or before endDate."


class InvalidRadius(BloomDataError):
    message = "Invalid radius. radius must be a non-negative number."


async def bloom_data_error_handler(request: Request, exc: BloomDataError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
