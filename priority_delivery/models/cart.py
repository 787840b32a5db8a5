"""Cart ORM models."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from priority_delivery.db.base import Base
from priority_delivery.models.product import Product


class Cart(Base):
    """Shopping cart addressed by its public masked id."""

    __tablename__ = "carts"

    id: Mapped[int] = mapped_column(primary_key=True)
    masked_id: Mapped[str] = mapped_column(String(32), unique=True, index=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    items: Mapped[list["CartItem"]] = relationship(
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.id",
    )

    @property
    def visible_items(self) -> list["CartItem"]:
        """Return top-level items; child rows of composite products are hidden."""
        return [item for item in self.items if item.parent_item_id is None]


class CartItem(Base):
    """Line in a cart referencing a product."""

    __tablename__ = "cart_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    cart_id: Mapped[int] = mapped_column(ForeignKey("carts.id"), nullable=False, index=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), nullable=False)
    parent_item_id: Mapped[int | None] = mapped_column(ForeignKey("cart_items.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    cart: Mapped[Cart] = relationship(back_populates="items")
    product: Mapped[Product] = relationship()
