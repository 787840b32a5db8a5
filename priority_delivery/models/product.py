"""Product ORM model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from priority_delivery.db.base import Base


class Product(Base):
    """Catalog product carrying the priority delivery flags.

    ``priority`` is read by the single-product check, ``priority_shipping`` by the cart check.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    sku: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    priority_shipping: Mapped[int | None] = mapped_column(Integer, nullable=True)
