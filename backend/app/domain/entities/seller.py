"""Domain entity: a salesperson responsible for projects."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Seller:
    """Core domain entity representing a seller."""

    name: str
    email: str
    phone: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
