"""SellScope — In-memory Catalogue Repository."""

from collections import defaultdict
from typing import Dict, List, Optional

from app.models.catalog_models import Creator, Product, Sale
from app.repositories.base import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):
    """Serves a fixed catalogue held in process memory.

    Lookups by id and the per-creator / per-product sales lists are indexed
    once at construction.
    """

    def __init__(self, creators: List[Creator], products: List[Product], sales: List[Sale]):
        self._creators = sorted(creators, key=lambda c: c.id)
        self._products = sorted(products, key=lambda p: p.id)
        self._sales = sorted(sales, key=lambda s: (s.sold_at, s.id))

        self._creator_index: Dict[str, Creator] = {c.id: c for c in self._creators}
        self._product_index: Dict[str, Product] = {p.id: p for p in self._products}

        self._sales_by_creator: Dict[str, List[Sale]] = defaultdict(list)
        self._sales_by_product: Dict[str, List[Sale]] = defaultdict(list)
        for s in self._sales:
            self._sales_by_creator[s.creator_id].append(s)
            self._sales_by_product[s.product_id].append(s)

    def list_creators(self) -> List[Creator]:
        return list(self._creators)

    def get_creator(self, creator_id: str) -> Optional[Creator]:
        return self._creator_index.get(creator_id)

    def list_products(self) -> List[Product]:
        return list(self._products)

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._product_index.get(product_id)

    def get_products_by_category(self, category: str) -> List[Product]:
        return [p for p in self._products if p.category == category]

    def list_sales(self) -> List[Sale]:
        return list(self._sales)

    def get_sales_by_creator(self, creator_id: str) -> List[Sale]:
        return list(self._sales_by_creator.get(creator_id, []))

    def get_sales_by_product(self, product_id: str) -> List[Sale]:
        return list(self._sales_by_product.get(product_id, []))
