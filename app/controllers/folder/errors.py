from app.exceptions import (
    BaseError,
    DashboardNotFoundError,
    FolderNotFoundError,
    FolderPermissionCheckError,
    GuardianError,
    NotAFolderError,
)

InternalFolderError = DashboardNotFoundError | NotAFolderError | GuardianError

# Both lookup failures collapse into one not-found kind so that a caller cannot
# tell a missing id from an id that belongs to a plain dashboard.
FOLDER_ERROR_MAP: dict[type[BaseError], type[BaseError]] = {
    DashboardNotFoundError: FolderNotFoundError,
    NotAFolderError: FolderNotFoundError,
    GuardianError: FolderPermissionCheckError,
}


def to_folder_error(error: InternalFolderError) -> BaseError:
    """Translate an internal error kind into the error a folder API client sees."""
    outward = FOLDER_ERROR_MAP[type(error)]
    if outward is FolderPermissionCheckError:
        return FolderPermissionCheckError(cause=error, **error.extra)
    return outward(**error.extra)  # type: ignore[call-arg]
