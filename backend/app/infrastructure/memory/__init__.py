from .entity_store import InMemoryEntityStore
from .seed_loader import DEFAULT_SEED_FILE, SeedData, load_seed_data

__all__ = [
    "InMemoryEntityStore",
    "DEFAULT_SEED_FILE",
    "SeedData",
    "load_seed_data",
]
