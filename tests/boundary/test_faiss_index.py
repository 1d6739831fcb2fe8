"""
Test suite for the FAISS vector index.

System role: Verification of local index upsert, query and persistence
"""

import threading
from pathlib import Path

import pytest

from chatpdf.boundary.vdb.faiss_index import FAISSVectorIndex
from chatpdf.boundary.vdb.vector_schemas import IndexRecord
from fakes import FAKE_DIMENSION, FakeEmbedder


def _records(embedder: FakeEmbedder, texts: dict[str, str]) -> list[IndexRecord]:
    return [
        IndexRecord(id=key, vector=embedder.embed_query(text), text=text, metadata={"text": text, "page": 0})
        for key, text in texts.items()
    ]


@pytest.fixture
def index(tmp_path: Path, fake_embedder: FakeEmbedder) -> FAISSVectorIndex:
    return FAISSVectorIndex(fake_embedder, FAKE_DIMENSION, persist_dir=str(tmp_path), index_name="test")


class TestFAISSVectorIndex:
    """Tests for FAISSVectorIndex."""

    def test_new_index_is_empty_and_does_not_embed(
        self, index: FAISSVectorIndex, fake_embedder: FakeEmbedder
    ) -> None:
        assert index.size == 0
        assert index.query([0.0] * FAKE_DIMENSION, top_k=5) == []
        assert fake_embedder.query_calls == []

    def test_query_returns_nearest_first(self, index: FAISSVectorIndex, fake_embedder: FakeEmbedder) -> None:
        index.upsert(
            _records(
                fake_embedder,
                {"a": "graphs and trees", "b": "sorting algorithms compared", "c": "dynamic programming"},
            )
        )

        matches = index.query(fake_embedder.embed_query("sorting algorithms compared"), top_k=2)

        assert len(matches) == 2
        assert matches[0].id == "b"
        assert matches[0].text == "sorting algorithms compared"

    def test_upsert_replaces_existing_ids(self, index: FAISSVectorIndex, fake_embedder: FakeEmbedder) -> None:
        index.upsert(_records(fake_embedder, {"a": "first version"}))
        index.upsert(_records(fake_embedder, {"a": "second version"}))

        matches = index.query(fake_embedder.embed_query("second version"), top_k=10)

        assert index.size == 1
        assert [m.text for m in matches] == ["second version"]

    def test_index_is_reloaded_from_disk(self, tmp_path: Path, fake_embedder: FakeEmbedder) -> None:
        first = FAISSVectorIndex(fake_embedder, FAKE_DIMENSION, persist_dir=str(tmp_path), index_name="persist")
        first.upsert(_records(fake_embedder, {"a": "persisted chunk"}))

        second = FAISSVectorIndex(fake_embedder, FAKE_DIMENSION, persist_dir=str(tmp_path), index_name="persist")

        assert second.size == 1
        assert second.query(fake_embedder.embed_query("persisted chunk"), top_k=1)[0].id == "a"

    def test_namespaces_use_separate_files(self, tmp_path: Path, fake_embedder: FakeEmbedder) -> None:
        ns_a = FAISSVectorIndex(fake_embedder, FAKE_DIMENSION, persist_dir=str(tmp_path), namespace="a")
        ns_a.upsert(_records(fake_embedder, {"x": "only in a"}))

        ns_b = FAISSVectorIndex(fake_embedder, FAKE_DIMENSION, persist_dir=str(tmp_path), namespace="b")

        assert ns_b.size == 0
        assert (tmp_path / "chatpdf-a.faiss").exists()

    def test_query_waits_for_in_progress_upsert(self, index: FAISSVectorIndex, fake_embedder: FakeEmbedder) -> None:
        # Arrange
        index.upsert(_records(fake_embedder, {"a": "graphs and trees"}))
        results: list = []
        reader = threading.Thread(
            target=lambda: results.append(index.query(fake_embedder.embed_query("graphs"), top_k=1))
        )

        # Act
        with index._lock:
            reader.start()
            reader.join(timeout=0.2)
            blocked = reader.is_alive()
        reader.join(timeout=5)

        # Assert
        assert blocked
        assert [m.id for m in results[0]] == ["a"]
