"""
Chat view state.

Framework-independent state behind the chat page: the visible message
list, the selected file, busy flags and the inline error. The message
list is append-only; a question shows up immediately and its answer (or
an error bubble) follows.

Dependencies: requests
System role: UI behaviour kept testable outside Streamlit
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Literal

import requests

from chatpdf.ui.api_client import ChatPDFClient

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "👋 Welcome! Upload a PDF and I'll help you explore its contents."
NO_FILE_ERROR = "Please select a PDF file first."
UPLOAD_ERROR = "Failed to upload PDF. Please try again."
ASK_ERROR = "⚠️ Error fetching answer. Please try again."
NO_RESPONSE = "⚠️ No response received."


@dataclass(frozen=True)
class ChatMessage:
    role: Literal["user", "assistant"]
    content: str


@dataclass
class PendingFile:
    name: str
    data: bytes


@dataclass
class ChatState:
    """State for one browser session."""

    messages: list[ChatMessage] = field(
        default_factory=lambda: [ChatMessage("assistant", WELCOME_MESSAGE)]
    )
    pending_file: PendingFile | None = None
    pdf_name: str | None = None
    is_uploading: bool = False
    is_asking: bool = False
    error: str | None = None
    conversation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    uploader_generation: int = 0

    @property
    def uploader_key(self) -> str:
        """Widget key for the file picker; changes after each successful upload."""
        return f"pdf-uploader-{self.uploader_generation}"

    def select_file(self, name: str, data: bytes) -> None:
        self.pending_file = PendingFile(name=name, data=data)
        self.error = None

    def upload(self, client: ChatPDFClient) -> bool:
        """
        Upload the pending file.

        Returns:
            bool: True when the document was indexed
        """
        if self.is_uploading:
            return False
        if self.pending_file is None:
            self.error = NO_FILE_ERROR
            return False

        self.is_uploading = True
        self.error = None
        pending = self.pending_file
        try:
            client.upload_pdf(pending.name, pending.data)
        except requests.RequestException as e:
            logger.warning(f"{__name__}:upload - Upload failed: {e}")
            self.error = UPLOAD_ERROR
            return False
        finally:
            self.is_uploading = False

        self.pdf_name = pending.name
        self.pending_file = None
        self.uploader_generation += 1
        self.messages.append(
            ChatMessage(
                "assistant",
                f"✅ Successfully indexed: **{pending.name}**. I'm ready to answer your questions!",
            )
        )
        return True

    def ask(self, client: ChatPDFClient, question: str) -> ChatMessage | None:
        """
        Send a question.

        Returns:
            ChatMessage | None: Appended reply, or None when nothing was sent
        """
        question = (question or "").strip()
        if not question or self.is_asking:
            return None

        self.is_asking = True
        self.messages.append(ChatMessage("user", question))
        try:
            answer = client.ask(question, self.conversation_id)
            reply = ChatMessage("assistant", answer or NO_RESPONSE)
        except requests.RequestException as e:
            logger.warning(f"{__name__}:ask - Ask failed: {e}")
            reply = ChatMessage("assistant", ASK_ERROR)
        finally:
            self.is_asking = False

        self.messages.append(reply)
        return reply
