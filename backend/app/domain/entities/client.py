"""Domain entity: a customer of the business."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Client:
    """Core domain entity representing a client.

    Clients own projects only through ``Project.client_id``; deleting a client
    leaves its projects untouched.
    """

    name: str
    phone: str
    email: str
    address: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
