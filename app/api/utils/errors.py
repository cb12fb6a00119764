import uuid

from fastapi.responses import JSONResponse

from app.api.payloads.error import APIError, ErrorDetail
from app.exceptions import BaseError


def create_error_response(error_type: str, message: str, status_code: int) -> JSONResponse:
    """
    Create a structured error response.

    Args:
        error_type: The type of error (e.g., "forbidden", "entity_not_found")
        message: Human-readable error message
        status_code: HTTP status code

    Returns:
        JSONResponse with structured error format
    """
    error_response = APIError(request_id=str(uuid.uuid4()), error=ErrorDetail(type=error_type, message=message))
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


def error_response_from(exc: BaseError) -> JSONResponse:
    """Render an application error. Only the generic message is exposed, never the cause."""
    return create_error_response(error_type=exc.error_type.value, message=exc.message, status_code=exc.status_code)
