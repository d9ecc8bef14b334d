from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import traceback
import logging
from typing import Dict, Any

from services.error_types import (
    CatalogLookupError,
    ConfigurationError,
    EnergyModelError,
    InputValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    CatalogLookupError: 404,
    InputValidationError: 422,
    ConfigurationError: 500,
}


def create_error_response(error_type: str, message: str, details: Dict[str, Any] = None) -> Dict[str, Any]:
    """Create structured error response"""
    content = {
        "error": {
            "type": error_type,
            "message": message
        }
    }
    if details:
        content["error"]["details"] = details
    return content


def status_for(exc: EnergyModelError) -> int:
    for error_class, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_class):
            return status_code
    return 500


async def energy_model_exception_handler(request: Request, exc: EnergyModelError):
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=create_error_response(type(exc).__name__, exc.message, exc.details),
    )


def install_error_handlers(app: FastAPI, debug: bool = False):
    """Register structured JSON handlers on the app"""

    async def traceback_exception_handler(request: Request, exc: Exception):
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(tb)
        message = tb if debug else "Internal server error"
        return JSONResponse(
            status_code=500,
            content=create_error_response("InternalServerError", message),
        )

    app.add_exception_handler(EnergyModelError, energy_model_exception_handler)
    app.add_exception_handler(Exception, traceback_exception_handler)
