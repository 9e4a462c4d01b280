"""Application service (use case) for Seller operations."""

from dataclasses import dataclass

from app.application.interfaces import EntityStore
from app.application.schemas import SellerCreate, SellerUpdate
from app.domain.entities import Seller
from app.domain.exceptions import EntityNotFoundError

from ._search import matches_search


@dataclass
class SellerOverview:
    seller: Seller
    project_count: int


class SellerService:
    """Orchestrates seller CRUD logic. Depends on the Entity Store port (DI)."""

    def __init__(self, store: EntityStore):
        self._store = store

    def get_seller(self, seller_id: str) -> Seller:
        seller = self._store.get_seller_by_id(seller_id)
        if seller is None:
            raise EntityNotFoundError("Seller", seller_id)
        return seller

    def list_sellers(self, search: str | None = None) -> list[SellerOverview]:
        projects = self._store.projects
        return [
            SellerOverview(
                seller=seller,
                project_count=sum(1 for p in projects if p.seller_id == seller.id),
            )
            for seller in self._store.sellers
            if matches_search(search, seller.name, seller.email)
        ]

    def create_seller(self, data: SellerCreate) -> Seller:
        return self._store.add_seller(data.model_dump())

    def update_seller(self, seller_id: str, data: SellerUpdate) -> Seller:
        self.get_seller(seller_id)
        updated = self._store.update_seller(seller_id, data.model_dump(exclude_unset=True))
        if updated is None:
            raise EntityNotFoundError("Seller", seller_id)
        return updated

    def delete_seller(self, seller_id: str) -> bool:
        """Delete a seller. Projects keep their ``seller_id``."""
        self.get_seller(seller_id)
        return self._store.delete_seller(seller_id)
