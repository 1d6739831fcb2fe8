"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents into retrievable chunks while preserving context.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from chatpdf.core.exceptions import ChunkingError


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Raises:
            ChunkingError: When there is nothing to split or splitting yields no chunks
        """
        if not documents:
            raise ChunkingError("No documents to chunk")

        chunks = [
            chunk
            for chunk in self._splitter.split_documents(documents)
            if chunk.page_content.strip()
        ]
        if not chunks:
            raise ChunkingError("Document produced no text chunks")
        return chunks
