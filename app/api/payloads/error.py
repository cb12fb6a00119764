from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Error detail: a machine readable type and a human readable message."""

    type: str
    message: str


class APIError(BaseModel):
    """Error response body shared by every endpoint."""

    request_id: str
    error: ErrorDetail
