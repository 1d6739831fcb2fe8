"""
Conversation state for the retrieval loop.

A conversation is an append-only list of role-tagged turns. The store
keeps one conversation per id, each guarded by its own asyncio.Lock so
that concurrent questions in the same conversation cannot interleave.

Dependencies: pydantic, asyncio
System role: Process-local memory for multi-turn question answering
"""

import asyncio
import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_CONVERSATION_ID = "default"
DEFAULT_MAX_CONVERSATIONS = 1000


class ConversationTurn(BaseModel):
    """One message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = Field(description="Who produced the text")
    text: str = Field(description="Turn content")


class ConversationHistory:
    """Ordered, append-only sequence of turns."""

    def __init__(self, turns: list[ConversationTurn] | None = None) -> None:
        self._turns: list[ConversationTurn] = list(turns or [])

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def extend(self, turns: list[ConversationTurn]) -> None:
        self._turns.extend(turns)

    @property
    def turns(self) -> list[ConversationTurn]:
        """Copy of all turns, oldest first."""
        return list(self._turns)

    def window(self, size: int) -> list[ConversationTurn]:
        """
        Most recent turns to send upstream.

        Args:
            size: Number of turns to keep (0 keeps everything)

        Returns:
            list[ConversationTurn]: Copy of the selected turns
        """
        if size <= 0:
            return list(self._turns)
        return list(self._turns[-size:])

    def __len__(self) -> int:
        return len(self._turns)


@dataclass
class Conversation:
    """A history plus the lock that serialises questions against it."""

    id: str
    history: ConversationHistory = field(default_factory=ConversationHistory)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


class ConversationStore:
    """
    In-memory map of conversation id to Conversation.

    Holds at most max_conversations entries. Creating one beyond the
    limit evicts the least recently used conversation whose lock is free.
    """

    def __init__(self, max_conversations: int = DEFAULT_MAX_CONVERSATIONS) -> None:
        if max_conversations <= 0:
            raise ValueError("max_conversations must be positive")
        self._max_conversations = max_conversations
        self._conversations: OrderedDict[str, Conversation] = OrderedDict()

    def get(self, conversation_id: str | None = None) -> Conversation:
        """
        Get or create a conversation, marking it most recently used.

        Args:
            conversation_id: Caller-supplied id (None selects the shared default)

        Returns:
            Conversation: Existing or newly created conversation
        """
        key = conversation_id or DEFAULT_CONVERSATION_ID
        conversation = self._conversations.get(key)
        if conversation is not None:
            self._conversations.move_to_end(key)
            return conversation

        self._evict()
        conversation = Conversation(id=key)
        self._conversations[key] = conversation
        logger.info(
            f"{__name__}:get - Created conversation",
            extra={"conversation_id": key, "conversations": len(self._conversations)},
        )
        return conversation

    def _evict(self) -> None:
        while len(self._conversations) >= self._max_conversations:
            victim = next(
                (key for key, conv in self._conversations.items() if not conv.lock.locked()),
                None,
            )
            if victim is None:
                # every conversation is mid-question; allow a temporary overshoot
                return
            del self._conversations[victim]
            logger.info(f"{__name__}:_evict - Evicted conversation", extra={"conversation_id": victim})

    def __contains__(self, conversation_id: str) -> bool:
        return conversation_id in self._conversations

    def __len__(self) -> int:
        return len(self._conversations)
