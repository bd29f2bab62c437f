"""SellScope — Read-only Catalogue Repository Interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.catalog_models import Creator, Product, Sale


class CatalogRepository(ABC):
    """Read access to creators, products and sales history.

    Every engine and handler goes through this interface, so the same logic
    runs over the in-memory reference data or a database. Returned lists are
    in the backing store's canonical order (creators and products by id,
    sales by ``sold_at``) and must not be mutated by callers.
    """

    @abstractmethod
    def list_creators(self) -> List[Creator]:
        ...

    @abstractmethod
    def get_creator(self, creator_id: str) -> Optional[Creator]:
        ...

    @abstractmethod
    def list_products(self) -> List[Product]:
        ...

    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]:
        ...

    @abstractmethod
    def get_products_by_category(self, category: str) -> List[Product]:
        ...

    @abstractmethod
    def list_sales(self) -> List[Sale]:
        ...

    @abstractmethod
    def get_sales_by_creator(self, creator_id: str) -> List[Sale]:
        ...

    @abstractmethod
    def get_sales_by_product(self, product_id: str) -> List[Sale]:
        ...
