"""Domain entities for projects and their line items."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from .project_file import ProjectFile, ProjectImage


class Company(str, Enum):
    """Brand under which a project is sold."""

    CAZA_43 = "Caza 43"
    SOHO = "SOHO"
    ELIAS = "ELIAS"


class ProjectStatus(str, Enum):
    """Lifecycle status of a project."""

    IN_PROGRESS = "Em andamento"
    FINISHED = "Finalizado"
    WAITING = "Aguardando"
    CANCELLED = "Cancelado"


class Environment(str, Enum):
    """Room or space a project covers."""

    KITCHEN = "Cozinha"
    BEDROOM = "Quarto"
    BATHROOM = "Banheiro"
    SOCIAL_AREA = "Área social"
    OFFICE = "Escritório"
    BARBECUE = "Churrasqueira"


@dataclass(frozen=True)
class Extra:
    """A named, quantified add-on item. ``id`` is unique within its project only."""

    name: str
    quantity: int
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass(frozen=True)
class Measurement:
    """A named dimension/value pair. ``id`` is unique within its project only."""

    name: str
    value: str
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class Project:
    """Core domain entity representing a furniture/renovation project.

    ``client_id`` and ``seller_id`` are plain references: nothing guarantees
    that they resolve to an existing Client or Seller.
    """

    name: str
    client_id: str
    company: Company
    seller_id: str
    status: ProjectStatus = ProjectStatus.IN_PROGRESS
    observations: str | None = None
    environments: list[Environment] = field(default_factory=list)
    measurement_date: datetime | None = None
    measurement_deadline: datetime | None = None
    delivery_address: str | None = None
    appliances: str | None = None
    extras: list[Extra] = field(default_factory=list)
    measurements: list[Measurement] = field(default_factory=list)
    images: list[ProjectImage] = field(default_factory=list)
    files: list[ProjectFile] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
