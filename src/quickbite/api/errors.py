"""Map domain and application exceptions to HTTP responses.

Error bodies share one shape: ``{"message": str, "errors": {field: [msgs]}}``.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from quickbite.exceptions import Forbidden, PaymentGatewayError, Unauthorized

logger = structlog.get_logger(__name__)


def _body(message: str, errors=None) -> dict:
    return {"message": message, "errors": errors or {}}


def _messages(exc) -> dict:
    messages = getattr(exc, "messages", None)
    return messages if isinstance(messages, dict) else {"_entity": [str(exc)]}


async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content=_body("Invalid request", _messages(exc)))


async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        errors.setdefault(".".join(location) or "_request", []).append(error.get("msg", "Invalid value"))
    return JSONResponse(status_code=400, content=_body("Invalid request", errors))


async def not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=_body("Not found", _messages(exc)))


async def unauthorized(request: Request, exc: Unauthorized) -> JSONResponse:
    return JSONResponse(status_code=401, content=_body(exc.message or "Not authenticated"))


async def forbidden(request: Request, exc: Forbidden) -> JSONResponse:
    return JSONResponse(status_code=403, content=_body(exc.message or "Forbidden"))


async def payment_gateway_error(request: Request, exc: PaymentGatewayError) -> JSONResponse:
    logger.error("Payment gateway failure", path=request.url.path, reason=exc.message)
    return JSONResponse(status_code=500, content=_body("Error creating payment intent"))


async def internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content=_body("Internal server error"))


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then the API's own on top of them."""
    register_exception_handlers(app)

    app.add_exception_handler(ValidationError, validation_error)
    app.add_exception_handler(RequestValidationError, request_validation_error)
    app.add_exception_handler(ObjectNotFoundError, not_found)
    app.add_exception_handler(Unauthorized, unauthorized)
    app.add_exception_handler(Forbidden, forbidden)
    app.add_exception_handler(PaymentGatewayError, payment_gateway_error)
    app.add_exception_handler(SchemaValidationError, internal_error)
    app.add_exception_handler(Exception, internal_error)
