"""
Gemini text generator.

Maps conversation turns onto google-genai Content objects and calls
generate_content with a per-call system instruction.

Dependencies: google.genai
System role: Generative model adapter for the retrieval loop
"""

import logging
from typing import Any

from google import genai
from google.genai import types

from chatpdf.core.exceptions import GenerationError
from chatpdf.core.rag_query.conversation import ConversationTurn

logger = logging.getLogger(__name__)


class GeminiTextGenerator:
    """TextGenerator backed by the Gemini generate_content API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.0,
        client: Any | None = None,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._client = client or genai.Client(api_key=api_key)

    @staticmethod
    def _to_contents(turns: list[ConversationTurn]) -> list[types.Content]:
        return [
            types.Content(role=turn.role, parts=[types.Part(text=turn.text)])
            for turn in turns
        ]

    def generate(self, turns: list[ConversationTurn], system_instruction: str) -> str:
        """
        Generate the next model turn.

        Args:
            turns: Conversation turns, oldest first
            system_instruction: Instruction for this call

        Returns:
            str: Response text ("" when the response has no text)

        Raises:
            GenerationError: When the API call fails
        """
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=self._to_contents(turns),
                config=types.GenerateContentConfig(
                    system_instruction=system_instruction,
                    temperature=self._temperature,
                ),
            )
        except Exception as e:
            logger.error(
                f"{__name__}:generate - Gemini API call failed - {type(e).__name__}: {e}",
                extra={"model": self._model, "turns": len(turns)},
            )
            raise GenerationError("Failed to generate response", cause=e) from e

        text = response.text or ""
        logger.debug(
            f"{__name__}:generate - Gemini API called successfully",
            extra={"model": self._model, "response_len": len(text)},
        )
        return text
