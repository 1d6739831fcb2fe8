"""
Vector index factory for selecting between FAISS (dev) and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE. Backends are imported only when selected.

Dependencies: chatpdf.boundary.vdb, chatpdf.configs
System role: Vector index instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from chatpdf.configs import Settings

logger = logging.getLogger(__name__)


def get_vector_index(settings: Settings, embeddings: Embeddings):
    """
    Build the vector index named by configuration.

    Args:
        settings: Application settings
        embeddings: Embedding function (stored by FAISS, unused by S3 Vectors)

    Returns:
        FAISSVectorIndex or S3VectorsIndex

    Raises:
        ValueError: If the store type is unknown
    """
    vs = settings.vector_store
    store_type = vs.store_type.lower()

    if store_type == "faiss":
        from chatpdf.boundary.vdb.faiss_index import FAISSVectorIndex

        logger.info(f"{__name__}:get_vector_index - Creating FAISS index (local dev mode)")
        return FAISSVectorIndex(
            embeddings=embeddings,
            dimension=settings.gemini.embedding_dimension,
            persist_dir=vs.faiss_dir,
            index_name=vs.index_name,
            namespace=vs.namespace,
        )

    if store_type == "s3":
        from chatpdf.boundary.vdb.s3_vectors_index import S3VectorsIndex

        logger.info(f"{__name__}:get_vector_index - Creating S3 Vectors index (production mode)")
        return S3VectorsIndex(
            vectors_bucket=vs.vectors_bucket,
            index_name=vs.index_name,
            region=vs.aws_region,
            namespace=vs.namespace,
            aws_access_key_id=vs.aws_access_key_id,
            aws_secret_access_key=vs.aws_secret_access_key,
        )

    raise ValueError(
        f"Invalid vector store type: {store_type}. Must be 'faiss' (dev) or 's3' (production)."
    )
