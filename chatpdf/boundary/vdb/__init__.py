"""
Vector index backends.

Backends are imported lazily through vector_index_factory so that
faiss and boto3 load only when selected.
"""

from .vector_schemas import IndexMatch, IndexRecord

__all__ = ["IndexMatch", "IndexRecord"]
