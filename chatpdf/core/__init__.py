"""Core domain logic: ingestion pipeline, retrieval loop, errors and interfaces."""
