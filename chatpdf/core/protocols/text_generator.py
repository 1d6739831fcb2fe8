"""Text generator protocol for dependency injection."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chatpdf.core.rag_query.conversation import ConversationTurn


@runtime_checkable
class TextGenerator(Protocol):
    """Generative model taking role-tagged turns plus a system instruction."""

    def generate(self, turns: list["ConversationTurn"], system_instruction: str) -> str:
        """Generate the next model turn.

        Args:
            turns: Conversation turns, oldest first.
            system_instruction: Instruction applied to this call only.

        Returns:
            Generated text (may be empty).
        """
        ...
