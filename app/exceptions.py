import enum
from http import HTTPStatus
from typing import Any


class ErrorType(enum.Enum):
    ENTITY_NOT_FOUND = "entity_not_found"
    FORBIDDEN = "forbidden"
    INTERNAL_ERROR = "internal_error"
    INVALID_DATA = "invalid_data"
    UNHANDLED_EXCEPTION = "unhandled_exception"
    UNAUTHORIZED_USER = "unauthorized_user"
    UNSPECIFIED = "unspecified"


class BaseError(Exception):
    extra: dict[str, Any]

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNSPECIFIED,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.extra = {}

        for key in ("action", "user", "org_id", "dashboard_id"):
            value = kwargs.get(key)
            if value is not None:
                self.extra[key] = value

    def __str__(self) -> str:
        return f"error: {self.error_type.value}; description: {self.message}"


class AuthError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNAUTHORIZED_USER,
        status_code: HTTPStatus = HTTPStatus.UNAUTHORIZED,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


class ActionForbiddenError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.FORBIDDEN,
        status_code: HTTPStatus = HTTPStatus.FORBIDDEN,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


class EntityNotFoundError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.ENTITY_NOT_FOUND,
        status_code: HTTPStatus = HTTPStatus.NOT_FOUND,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


class InternalError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL_ERROR,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


# Internal kinds. These never reach a client as-is; see app.controllers.folder.errors.


class DashboardNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Dashboard not found", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NotAFolderError(EntityNotFoundError):
    def __init__(self, message: str = "Dashboard is not a folder", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class GuardianError(InternalError):
    """Permission resolution could not be carried out. Distinct from a resolved denial."""

    def __init__(self, message: str, cause: BaseException | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause


# Outward kinds for the folder API.


class FolderNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Folder not found", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class FolderAccessDeniedError(ActionForbiddenError):
    def __init__(self, message: str = "Access denied to this folder", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class FolderPermissionCheckError(InternalError):
    def __init__(
        self, message: str = "Error while checking folder permissions", cause: BaseException | None = None, **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause
