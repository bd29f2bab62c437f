"""SellScope — SQL Catalogue Repository (SQLModel tables)."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from app.models.catalog_models import Creator, Product, Sale
from app.models.db_models import CreatorRecord, ProductRecord, SaleRecord
from app.repositories.base import CatalogRepository
from app.core.logging import get_logger

logger = get_logger("repositories.sql")


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way in; stored timestamps are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_creator(record: CreatorRecord) -> Creator:
    data = record.model_dump()
    data["joined_at"] = _as_utc(record.joined_at)
    return Creator.model_validate(data)


def _to_product(record: ProductRecord) -> Product:
    return Product.model_validate(record.model_dump())


def _to_sale(record: SaleRecord) -> Sale:
    data = record.model_dump()
    data["sold_at"] = _as_utc(record.sold_at)
    return Sale.model_validate(data)


class SqlCatalogRepository(CatalogRepository):
    """Reads the catalogue from the ``creators``, ``products`` and ``sales`` tables."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def list_creators(self) -> List[Creator]:
        with Session(self._engine) as session:
            rows = session.exec(select(CreatorRecord).order_by(CreatorRecord.id)).all()
            return [_to_creator(r) for r in rows]

    def get_creator(self, creator_id: str) -> Optional[Creator]:
        with Session(self._engine) as session:
            record = session.get(CreatorRecord, creator_id)
            return _to_creator(record) if record else None

    def list_products(self) -> List[Product]:
        with Session(self._engine) as session:
            rows = session.exec(select(ProductRecord).order_by(ProductRecord.id)).all()
            return [_to_product(r) for r in rows]

    def get_product(self, product_id: str) -> Optional[Product]:
        with Session(self._engine) as session:
            record = session.get(ProductRecord, product_id)
            return _to_product(record) if record else None

    def get_products_by_category(self, category: str) -> List[Product]:
        with Session(self._engine) as session:
            rows = session.exec(
                select(ProductRecord)
                .where(ProductRecord.category == category)
                .order_by(ProductRecord.id)
            ).all()
            return [_to_product(r) for r in rows]

    def list_sales(self) -> List[Sale]:
        with Session(self._engine) as session:
            rows = session.exec(
                select(SaleRecord).order_by(SaleRecord.sold_at, SaleRecord.id)
            ).all()
            return [_to_sale(r) for r in rows]

    def get_sales_by_creator(self, creator_id: str) -> List[Sale]:
        with Session(self._engine) as session:
            rows = session.exec(
                select(SaleRecord)
                .where(SaleRecord.creator_id == creator_id)
                .order_by(SaleRecord.sold_at, SaleRecord.id)
            ).all()
            return [_to_sale(r) for r in rows]

    def get_sales_by_product(self, product_id: str) -> List[Sale]:
        with Session(self._engine) as session:
            rows = session.exec(
                select(SaleRecord)
                .where(SaleRecord.product_id == product_id)
                .order_by(SaleRecord.sold_at, SaleRecord.id)
            ).all()
            return [_to_sale(r) for r in rows]


# ── Seeding ──


def seed_catalog(
    session: Session,
    creators: List[Creator],
    products: List[Product],
    sales: List[Sale],
) -> int:
    """Insert the reference catalogue if the tables are empty.

    Returns the number of rows inserted (0 when already seeded).
    """
    if session.exec(select(CreatorRecord).limit(1)).first() is not None:
        logger.info("Catalogue already seeded, skipping")
        return 0

    for c in creators:
        session.add(
            CreatorRecord(
                **{
                    **c.model_dump(),
                    "platform": c.platform.value,
                    "categories": [cat.value for cat in c.categories],
                }
            )
        )
    for p in products:
        session.add(ProductRecord(**{**p.model_dump(), "category": p.category.value}))
    # Parents must exist before sales reference them
    session.flush()
    for s in sales:
        session.add(SaleRecord(**s.model_dump()))
    session.commit()

    inserted = len(creators) + len(products) + len(sales)
    logger.info(f"Seeded catalogue: {len(creators)} creators, {len(products)} products, {len(sales)} sales")
    return inserted
