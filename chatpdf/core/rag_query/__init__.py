"""
Conversational retrieval loop.

Exports: ConversationTurn, ConversationHistory, ConversationStore,
ConversationalRetriever, RetrievedContext
"""

from .conversation import (
    Conversation,
    ConversationHistory,
    ConversationStore,
    ConversationTurn,
    DEFAULT_CONVERSATION_ID,
)
from .retrieval_loop import ConversationalRetriever, RetrievedContext

__all__ = [
    "Conversation",
    "ConversationHistory",
    "ConversationStore",
    "ConversationTurn",
    "ConversationalRetriever",
    "DEFAULT_CONVERSATION_ID",
    "RetrievedContext",
]
