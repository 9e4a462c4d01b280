from .blob_storage import BlobStorage, StoredBlob
from .entity_store import EntityStore

__all__ = [
    "BlobStorage",
    "StoredBlob",
    "EntityStore",
]
