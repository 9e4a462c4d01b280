"""Abstract blob storage interface (port) for uploaded file bytes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredBlob:
    """Bytes of one uploaded file together with its declared mime type."""

    key: str
    content: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class BlobStorage(ABC):
    """Port for holding uploaded bytes, implemented in the infrastructure layer."""

    @abstractmethod
    def put(self, key: str, content: bytes, mime_type: str) -> StoredBlob:
        """Store ``content`` under ``key``, replacing any previous blob."""
        ...

    @abstractmethod
    def get(self, key: str) -> StoredBlob | None:
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Discard a blob. Returns True if deleted, False if not found."""
        ...
