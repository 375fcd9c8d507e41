"""Data-access layer for products."""

from collections.abc import Iterable
from decimal import Decimal

from sqlalchemy import func, text
from sqlmodel import Session, select

from catalog_demo.entities.service.product.entity import Product
from catalog_demo.entities.service.product.query import ProductPage, ProductQuery
from catalog_demo.entities.service.product.table import ProductTable


def _to_row(product: Product) -> ProductTable:
    return ProductTable(
        id=product.id,
        name=product.name,
        category=product.category,
        price=Decimal(str(product.price)),
        status=product.status.value,
        quantity=product.quantity,
        last_checked=product.last_checked,
    )


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def dialect(self) -> str:
        return self._session.get_bind().dialect.name

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.from_row(row)

    def list_all(self, limit: int | None = None) -> list[Product]:
        """Products in id order. ``limit`` caps the rows fetched from the database."""
        statement = select(ProductTable).order_by(ProductTable.id)
        if limit is not None:
            statement = statement.limit(limit)
        rows = self._session.exec(statement).all()
        return [Product.from_row(row) for row in rows]

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(ProductTable)).one()

    def create(self, product: Product) -> Product:
        row = _to_row(product)
        self._session.add(row)
        self._session.flush()
        return Product.from_row(row)

    def create_many(self, products: Iterable[Product]) -> int:
        """Insert a batch in one round trip. Returns the number of rows."""
        rows = [_to_row(product).model_dump(exclude={"id"}) for product in products]
        if not rows:
            return 0
        self._session.execute(ProductTable.__table__.insert(), rows)
        return len(rows)

    def update(self, product: Product) -> Product:
        row = self._session.get(ProductTable, product.id)
        if row is None:
            raise ValueError(f"Product {product.id} not found")

        row.name = product.name
        row.category = product.category
        row.price = Decimal(str(product.price))
        row.status = product.status.value
        row.quantity = product.quantity
        row.last_checked = product.last_checked
        self._session.add(row)
        self._session.flush()
        return Product.from_row(row)

    def delete(self, product_id: int) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def query(self, query: ProductQuery) -> ProductPage:
        """Run the count and page queries for a listing request."""
        count_sql, count_params = query.build_count_query(self.dialect)
        total_count = self._session.execute(text(count_sql), count_params).scalar_one()

        select_sql, select_params = query.build_select_query(self.dialect)
        result = self._session.execute(text(select_sql), select_params)
        products = [Product.from_row(row) for row in result]

        return ProductPage(
            products=products,
            total_count=int(total_count),
            page=query.page,
            limit=query.limit,
        )
