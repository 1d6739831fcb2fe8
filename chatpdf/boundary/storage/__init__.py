"""Local storage for uploaded files."""

from .upload_store import UploadStore

__all__ = ["UploadStore"]
