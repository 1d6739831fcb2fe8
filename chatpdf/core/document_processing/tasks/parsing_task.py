"""
Document parsing task using LangChain PyPDFLoader.

Converts PDF documents into LangChain Documents, one per page.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from chatpdf.core.exceptions import ParsingError


class ParsingTask:
    """Parse PDF documents into LangChain Documents."""

    def parse(self, file_path: str) -> list[Document]:
        """
        Parse PDF document into LangChain Documents.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: Page documents with page and source metadata

        Raises:
            ParsingError: When the file is missing, not a PDF, unreadable or has no text
        """
        path = Path(file_path)
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", file_path)

        if path.suffix.lower() != ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                file_path,
            )

        try:
            documents = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise ParsingError("Failed to parse PDF", file_path, cause=e) from e

        if not any(doc.page_content.strip() for doc in documents):
            raise ParsingError("PDF document contains no extractable text", file_path)

        return documents
