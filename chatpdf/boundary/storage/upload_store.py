"""
Upload staging store.

Saves uploaded files under a server-generated name: epoch milliseconds
plus the original extension. Names are strictly increasing even when
two uploads arrive within the same millisecond.

Dependencies: asyncio, shutil
System role: Temporary file storage for the upload endpoint
"""

import asyncio
import logging
import shutil
import threading
import time
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


class UploadStore:
    """Writes uploads to a local directory under timestamp names."""

    def __init__(self, upload_dir: str = "/tmp/uploads") -> None:
        self._dir = Path(upload_dir)
        self._lock = threading.Lock()
        self._last_stamp = 0

    @property
    def directory(self) -> Path:
        return self._dir

    def ensure_directory(self) -> Path:
        """Create the upload directory if it is missing."""
        self._dir.mkdir(parents=True, exist_ok=True)
        return self._dir

    def _next_name(self, original_name: str) -> str:
        suffix = Path(original_name).suffix.lower()
        with self._lock:
            stamp = max(int(time.time() * 1000), self._last_stamp + 1)
            self._last_stamp = stamp
        return f"{stamp}{suffix}"

    def _write(self, source: BinaryIO, destination: Path) -> None:
        with destination.open("wb") as out:
            shutil.copyfileobj(source, out)

    async def save(self, original_name: str, source: BinaryIO) -> Path:
        """
        Persist an uploaded stream.

        Args:
            original_name: Client-supplied file name (only its extension is kept)
            source: Readable binary stream

        Returns:
            Path: Location of the stored file
        """
        self.ensure_directory()
        destination = self._dir / self._next_name(original_name)
        await asyncio.to_thread(self._write, source, destination)
        logger.info(
            f"{__name__}:save - Stored upload",
            extra={"original_name": original_name, "stored_as": destination.name},
        )
        return destination
