"""Protocols for dependency injection of upstream capabilities."""

from .embedder import Embedder
from .text_generator import TextGenerator
from .vector_index import VectorIndex

__all__ = ["Embedder", "TextGenerator", "VectorIndex"]
