"""Request and response models for the HTTP surface."""

from .chat import AskRequest, AskResponse
from .common import ErrorResponse
from .document import UploadResponse, UploadResult

__all__ = [
    "AskRequest",
    "AskResponse",
    "ErrorResponse",
    "UploadResponse",
    "UploadResult",
]
