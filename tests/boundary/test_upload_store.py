"""
Test suite for the upload store.

System role: Verification of timestamp naming and file persistence
"""

import io
from pathlib import Path

import pytest

from chatpdf.boundary.storage import UploadStore


class TestUploadStore:
    """Tests for UploadStore."""

    @pytest.mark.asyncio
    async def test_save_writes_content_under_timestamp_name(self, tmp_path: Path) -> None:
        store = UploadStore(str(tmp_path / "uploads"))

        path = await store.save("Lecture Notes.PDF", io.BytesIO(b"%PDF-1.4 data"))

        assert path.parent == tmp_path / "uploads"
        assert path.suffix == ".pdf"
        assert path.stem.isdigit()
        assert path.read_bytes() == b"%PDF-1.4 data"

    @pytest.mark.asyncio
    async def test_names_strictly_increase(self, tmp_path: Path) -> None:
        store = UploadStore(str(tmp_path))

        paths = [await store.save("a.pdf", io.BytesIO(b"x")) for _ in range(5)]

        stamps = [int(p.stem) for p in paths]
        assert stamps == sorted(set(stamps))

    def test_ensure_directory_creates_missing_dir(self, tmp_path: Path) -> None:
        store = UploadStore(str(tmp_path / "nested" / "uploads"))

        store.ensure_directory()

        assert store.directory.is_dir()
