"""
HTTP client for the ChatPDF API.

Dependencies: requests
System role: UI-side access to /upload and /ask
"""

import requests

DEFAULT_TIMEOUT = 120


class ChatPDFClient:
    """Thin requests wrapper. Non-2xx responses raise requests.HTTPError."""

    def __init__(self, base_url: str = "http://localhost:5000", session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

    def upload_pdf(self, filename: str, data: bytes) -> dict:
        """POST the file as multipart field "pdf"."""
        response = self._session.post(
            f"{self.base_url}/upload",
            files={"pdf": (filename, data, "application/pdf")},
            timeout=DEFAULT_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()

    def ask(self, question: str, conversation_id: str | None = None) -> str:
        """POST a question and return the answer text ("" when absent)."""
        payload = {"question": question}
        if conversation_id:
            payload["conversationId"] = conversation_id
        response = self._session.post(
            f"{self.base_url}/ask",
            json=payload,
            timeout=DEFAULT_TIMEOUT,
        )
        response.raise_for_status()
        return response.json().get("answer") or ""
