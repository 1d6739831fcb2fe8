"""Adapters for external systems: vector indexes, Gemini and local storage."""
