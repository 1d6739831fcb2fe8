"""
Test suite for the Gemini text generator.

System role: Verification of turn mapping and error wrapping for generate_content
"""

from unittest.mock import MagicMock

import pytest

from chatpdf.boundary.llm import GeminiTextGenerator
from chatpdf.core.exceptions import GenerationError
from chatpdf.core.rag_query import ConversationTurn


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock()
    client.models.generate_content.return_value = MagicMock(text="generated")
    return client


class TestGeminiTextGenerator:
    """Tests for GeminiTextGenerator."""

    def test_generate_maps_turns_and_system_instruction(self, client: MagicMock) -> None:
        # Arrange
        generator = GeminiTextGenerator(api_key="k", model="gemini-2.0-flash", client=client)
        turns = [ConversationTurn(role="user", text="hi"), ConversationTurn(role="model", text="hello")]

        # Act
        result = generator.generate(turns, "be brief")

        # Assert
        assert result == "generated"
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.0-flash"
        assert [c.role for c in kwargs["contents"]] == ["user", "model"]
        assert kwargs["contents"][1].parts[0].text == "hello"
        assert kwargs["config"].system_instruction == "be brief"
        assert kwargs["config"].temperature == 0.0

    def test_missing_text_returns_empty_string(self, client: MagicMock) -> None:
        client.models.generate_content.return_value = MagicMock(text=None)
        generator = GeminiTextGenerator(api_key="k", client=client)

        assert generator.generate([ConversationTurn(role="user", text="q")], "s") == ""

    def test_api_failure_raises_generation_error(self, client: MagicMock) -> None:
        client.models.generate_content.side_effect = RuntimeError("429 RESOURCE_EXHAUSTED")
        generator = GeminiTextGenerator(api_key="k", client=client)

        with pytest.raises(GenerationError) as exc_info:
            generator.generate([ConversationTurn(role="user", text="q")], "s")

        assert "RESOURCE_EXHAUSTED" in exc_info.value.cause
