"""Generative model adapters."""

from .gemini_generator import GeminiTextGenerator

__all__ = ["GeminiTextGenerator"]
