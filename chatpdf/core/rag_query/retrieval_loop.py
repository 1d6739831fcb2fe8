"""
Conversational retrieval loop.

Per question: rewrite the follow-up into a standalone query, embed it,
fetch the top-K chunks, then answer from those chunks with the
conversation history as extra context. History is committed only after
an answer is produced, so every successful question adds exactly two
turns and a failed one adds none.

Dependencies: asyncio, chatpdf.core.protocols
System role: Question-answering orchestration over an indexed document
"""

import asyncio
import logging

from pydantic import BaseModel, Field

from chatpdf.boundary.vdb.vector_schemas import IndexMatch
from chatpdf.core.exceptions import (
    ChatPDFException,
    EmbeddingError,
    EmptyResponseError,
    GenerationError,
    VectorStoreError,
)
from chatpdf.core.protocols import Embedder, TextGenerator, VectorIndex
from chatpdf.core.rag_query.conversation import ConversationHistory, ConversationTurn
from chatpdf.core.rag_query.prompts import (
    CONTEXT_SEPARATOR,
    REWRITE_SYSTEM_PROMPT,
    build_answer_instruction,
)

logger = logging.getLogger(__name__)


class RetrievedContext(BaseModel):
    """Chunks fetched for one rewritten query."""

    query: str = Field(description="Standalone query that was embedded")
    matches: list[IndexMatch] = Field(default_factory=list)
    text: str = Field(default="", description="Match texts joined in rank order")


class ConversationalRetriever:
    """Rewrite, retrieve and answer against a single vector index."""

    def __init__(
        self,
        embedder: Embedder,
        vector_index: VectorIndex,
        generator: TextGenerator,
        top_k: int = 10,
        history_window: int = 0,
        separator: str = CONTEXT_SEPARATOR,
    ) -> None:
        """
        Initialize the retriever.

        Args:
            embedder: Query embedder (same model as used at ingestion)
            vector_index: Index holding the document chunks
            generator: Generative model for rewriting and answering
            top_k: Chunks retrieved per question
            history_window: Turns sent upstream (0 sends the full history)
            separator: Delimiter between chunk texts in the context
        """
        if top_k <= 0:
            raise ValueError("top_k must be positive")
        self._embedder = embedder
        self._vector_index = vector_index
        self._generator = generator
        self._top_k = top_k
        self._history_window = history_window
        self._separator = separator

    async def _generate(
        self, turns: list[ConversationTurn], system_instruction: str, stage: str
    ) -> str:
        try:
            return await asyncio.to_thread(self._generator.generate, turns, system_instruction)
        except ChatPDFException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:_generate - {stage} call failed: {type(e).__name__}: {e}")
            raise GenerationError(f"Failed to generate {stage}", cause=e) from e

    async def rewrite_query(self, question: str, history: ConversationHistory) -> str:
        """
        Rephrase a follow-up question into a standalone query.

        The question is sent as a transient user turn; history is not modified.

        Raises:
            GenerationError: Generative call failed
            EmptyResponseError: Model returned blank text
        """
        turns = history.window(self._history_window)
        turns.append(ConversationTurn(role="user", text=question))

        rewritten = await self._generate(turns, REWRITE_SYSTEM_PROMPT, "rewrite")
        rewritten = (rewritten or "").strip()
        if not rewritten:
            raise EmptyResponseError("rewrite")

        logger.info(
            f"{__name__}:rewrite_query - Rewrote question",
            extra={"question_len": len(question), "rewritten_len": len(rewritten)},
        )
        return rewritten

    async def retrieve_context(self, query: str) -> RetrievedContext:
        """
        Embed the query and fetch the top-K chunk texts.

        Matches are joined in the order the index returns them. No
        reranking, deduplication or score threshold is applied.

        Raises:
            EmbeddingError: Query embedding failed
            VectorStoreError: Index query failed
        """
        try:
            vector = await asyncio.to_thread(self._embedder.embed_query, query)
        except ChatPDFException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:retrieve_context - Embedding failed: {type(e).__name__}: {e}")
            raise EmbeddingError("Failed to embed question", cause=e) from e

        try:
            matches = await asyncio.to_thread(self._vector_index.query, vector, self._top_k)
        except ChatPDFException:
            raise
        except Exception as e:
            logger.error(f"{__name__}:retrieve_context - Index query failed: {type(e).__name__}: {e}")
            raise VectorStoreError("Failed to query vector index", operation="query", cause=e) from e

        text = self._separator.join(match.text for match in matches)
        logger.info(
            f"{__name__}:retrieve_context - Retrieved {len(matches)} chunks",
            extra={"top_k": self._top_k, "context_len": len(text)},
        )
        return RetrievedContext(query=query, matches=list(matches), text=text)

    async def answer(self, question: str, history: ConversationHistory) -> str:
        """
        Answer one question and record it in the history.

        On success appends the rewritten question (user) and the answer
        (model). On failure the history is left unchanged.

        Args:
            question: Raw question as typed by the user
            history: Conversation to read from and append to

        Returns:
            str: Model answer text

        Raises:
            UpstreamError: Any generative, embedding or index failure
            EmptyResponseError: Model returned blank text
        """
        rewritten = await self.rewrite_query(question, history)
        context = await self.retrieve_context(rewritten)

        user_turn = ConversationTurn(role="user", text=rewritten)
        turns = history.window(self._history_window)
        turns.append(user_turn)

        answer = await self._generate(turns, build_answer_instruction(context.text), "answer")
        if not answer or not answer.strip():
            raise EmptyResponseError("answer")

        history.extend([user_turn, ConversationTurn(role="model", text=answer)])
        logger.info(
            f"{__name__}:answer - Answered question",
            extra={"answer_len": len(answer), "history_len": len(history)},
        )
        return answer
