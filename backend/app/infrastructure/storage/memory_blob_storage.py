"""In-memory blob storage for uploaded project files.

Bytes live only as long as the process does, like the rest of the store.
"""

import logging

from app.application.interfaces import BlobStorage, StoredBlob

logger = logging.getLogger(__name__)


class InMemoryBlobStorage(BlobStorage):
    """Infrastructure adapter keeping uploaded bytes in a dict keyed by file id."""

    def __init__(self) -> None:
        self._blobs: dict[str, StoredBlob] = {}

    def put(self, key: str, content: bytes, mime_type: str) -> StoredBlob:
        blob = StoredBlob(key=key, content=content, mime_type=mime_type)
        self._blobs[key] = blob
        logger.info("Stored blob: %s (%d bytes)", key, blob.size)
        return blob

    def get(self, key: str) -> StoredBlob | None:
        return self._blobs.get(key)

    def delete(self, key: str) -> bool:
        if self._blobs.pop(key, None) is None:
            return False
        logger.info("Deleted blob: %s", key)
        return True

    def __len__(self) -> int:
        return len(self._blobs)
