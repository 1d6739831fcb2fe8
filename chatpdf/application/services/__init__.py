"""
Application services.

Exports: ChatService, DocumentService
"""

from .chat_service import ChatService
from .document_service import DocumentService

__all__ = ["ChatService", "DocumentService"]
