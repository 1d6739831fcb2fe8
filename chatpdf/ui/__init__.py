"""Chat UI: HTTP client, view state and the Streamlit page."""

from .api_client import ChatPDFClient
from .chat_state import ChatMessage, ChatState

__all__ = ["ChatMessage", "ChatPDFClient", "ChatState"]
