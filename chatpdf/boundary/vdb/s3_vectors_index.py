"""
S3 Vectors index for deployment.

Talks to Amazon S3 Vectors through the boto3 s3vectors client. Chunk
text is stored in metadata under "text" and returned with every query.
An optional namespace is written into metadata and used as a query filter.

Dependencies: boto3
System role: Managed vector index backend
"""

import logging
from typing import Any

import boto3

from chatpdf.boundary.vdb.vector_schemas import IndexMatch, IndexRecord
from chatpdf.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

# put_vectors accepts at most 500 vectors per call
PUT_BATCH_SIZE = 500


class S3VectorsIndex:
    """Amazon S3 Vectors index keyed by chunk id."""

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        region: str = "us-east-1",
        namespace: str = "",
        client: Any | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
    ) -> None:
        """
        Initialize the S3 Vectors client.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region
            namespace: Optional partition written to and filtered on metadata
            client: Pre-built s3vectors client (tests)
            aws_access_key_id: Explicit credentials (falls back to the default chain)
            aws_secret_access_key: Explicit credentials

        Raises:
            ValueError: When vectors_bucket or index_name is empty
        """
        if not vectors_bucket:
            raise ValueError("vectors_bucket cannot be empty")
        if not index_name:
            raise ValueError("index_name cannot be empty")

        self._bucket = vectors_bucket
        self._index_name = index_name
        self._namespace = namespace
        self._client = client or boto3.client(
            "s3vectors",
            region_name=region,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
        )

    def upsert(self, records: list[IndexRecord]) -> None:
        """Write records with put_vectors, overwriting existing keys."""
        for start in range(0, len(records), PUT_BATCH_SIZE):
            batch = records[start:start + PUT_BATCH_SIZE]
            vectors = []
            for record in batch:
                metadata = {**record.metadata, "text": record.text}
                if self._namespace:
                    metadata["namespace"] = self._namespace
                vectors.append(
                    {
                        "key": record.id,
                        "data": {"float32": [float(v) for v in record.vector]},
                        "metadata": metadata,
                    }
                )
            try:
                self._client.put_vectors(
                    vectorBucketName=self._bucket,
                    indexName=self._index_name,
                    vectors=vectors,
                )
            except Exception as e:
                logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
                raise VectorStoreError("Failed to upsert into S3 Vectors", operation="upsert", cause=e) from e

        logger.info(
            f"{__name__}:upsert - Upserted {len(records)} records",
            extra={"bucket": self._bucket, "index": self._index_name},
        )

    def query(self, vector: list[float], top_k: int) -> list[IndexMatch]:
        """Return the top_k nearest records with metadata and distance."""
        kwargs: dict[str, Any] = {
            "vectorBucketName": self._bucket,
            "indexName": self._index_name,
            "queryVector": {"float32": [float(v) for v in vector]},
            "topK": top_k,
            "returnMetadata": True,
            "returnDistance": True,
        }
        if self._namespace:
            kwargs["filter"] = {"namespace": self._namespace}

        try:
            response = self._client.query_vectors(**kwargs)
        except Exception as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError("Failed to query S3 Vectors", operation="query", cause=e) from e

        matches = []
        for item in response.get("vectors", []):
            metadata = dict(item.get("metadata") or {})
            matches.append(
                IndexMatch(
                    id=item.get("key", ""),
                    text=str(metadata.get("text", "")),
                    score=float(item.get("distance", 0.0)),
                    metadata=metadata,
                )
            )
        return matches
