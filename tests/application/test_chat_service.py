"""
Test suite for ChatService.

System role: Verification of question validation and per-conversation routing
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from chatpdf.application.services import ChatService
from chatpdf.core.exceptions import ValidationError
from chatpdf.core.rag_query import ConversationalRetriever, ConversationStore
from chatpdf.core.rag_query.prompts import REWRITE_SYSTEM_PROMPT
from fakes import FakeEmbedder, FakeGenerator, FakeVectorIndex


@pytest.fixture
def retriever() -> MagicMock:
    retriever = MagicMock(spec=ConversationalRetriever)
    retriever.answer = AsyncMock(return_value="the answer")
    return retriever


class TestChatServiceAsk:
    """Tests for ChatService.ask."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", [None, "", "   \n"])
    async def test_blank_question_is_rejected_before_retrieval(
        self, retriever: MagicMock, question: str | None
    ) -> None:
        service = ChatService(retriever, ConversationStore())

        with pytest.raises(ValidationError) as exc_info:
            await service.ask(question)

        assert exc_info.value.details["field"] == "question"
        retriever.answer.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_conversation_is_used_without_id(self, retriever: MagicMock) -> None:
        store = ConversationStore()
        service = ChatService(retriever, store)

        answer = await service.ask("What is a heap?")

        assert answer == "the answer"
        history = retriever.answer.call_args.args[1]
        assert history is store.get(None).history

    @pytest.mark.asyncio
    async def test_conversations_do_not_share_history(self) -> None:
        # Arrange
        generator = FakeGenerator(
            lambda turns, instruction: "rewritten" if instruction == REWRITE_SYSTEM_PROMPT else "answer"
        )
        store = ConversationStore()
        service = ChatService(
            ConversationalRetriever(FakeEmbedder(), FakeVectorIndex(), generator), store
        )

        # Act
        await service.ask("q1", "alice")
        await service.ask("q2", "alice")
        await service.ask("q1", "bob")

        # Assert
        assert len(store.get("alice").history) == 4
        assert len(store.get("bob").history) == 2
        assert len(store.get(None).history) == 0
