"""
Chat service.

Validates the question, picks the conversation and runs the retrieval
loop under that conversation's lock.

Dependencies: chatpdf.core.rag_query
System role: Question-answering orchestration for the ask endpoint
"""

import logging

from chatpdf.core.exceptions import ValidationError
from chatpdf.core.rag_query import ConversationalRetriever, ConversationStore

logger = logging.getLogger(__name__)


class ChatService:
    """Answer questions against the indexed document."""

    def __init__(self, retriever: ConversationalRetriever, conversations: ConversationStore) -> None:
        """
        Initialize chat service.

        Args:
            retriever: Conversational retrieval loop
            conversations: Store holding every conversation's history
        """
        self.retriever = retriever
        self.conversations = conversations

    async def ask(self, question: str | None, conversation_id: str | None = None) -> str:
        """
        Answer one question.

        Args:
            question: User question
            conversation_id: Conversation to continue (None selects the shared default)

        Returns:
            str: Generated answer

        Raises:
            ValidationError: Question missing or blank
            UpstreamError: Any upstream failure
            EmptyResponseError: Model returned blank text
        """
        if question is None or not question.strip():
            raise ValidationError("Question is required", field="question")

        conversation = self.conversations.get(conversation_id)
        async with conversation.lock:
            logger.info(
                f"{__name__}:ask - Answering question",
                extra={"conversation_id": conversation.id, "history_len": len(conversation.history)},
            )
            return await self.retriever.answer(question, conversation.history)
