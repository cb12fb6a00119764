"""
Pydantic request/response models of the HTTP API.
"""

from .error import APIError, ErrorDetail
from .folders import DeleteFolderResponse, Folder, FolderResponse

__all__ = [
    "APIError",
    "DeleteFolderResponse",
    "ErrorDetail",
    "Folder",
    "FolderResponse",
]
