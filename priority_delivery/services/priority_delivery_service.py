"""Priority delivery checks for single products and carts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from priority_delivery.models.cart import Cart
from priority_delivery.models.product import Product
from priority_delivery.services.delivery_window import (
    BlackoutConfig,
    ConfigurationError,
    EvaluationResult,
    aggregate_results,
    evaluate,
    load_blackout_config,
)
from priority_delivery.services.settings_service import SettingsConfigurationProvider

logger = logging.getLogger(__name__)

PRODUCT_PRIORITY_ATTRIBUTE: str = "priority"
CART_ITEM_PRIORITY_ATTRIBUTE: str = "priority_shipping"

OutcomeStatus = Literal["enabled", "disabled", "error"]
ErrorKind = Literal["configuration", "unexpected"]


class PriorityDeliveryNotFoundError(Exception):
    """Raised when the referenced product or cart does not exist."""


class ProductNotFoundError(PriorityDeliveryNotFoundError):
    """Raised when no product matches the requested SKU."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"Product with SKU {sku} not found.")
        self.sku = sku


class CartNotFoundError(PriorityDeliveryNotFoundError):
    """Raised when no active cart matches the masked cart id."""

    def __init__(self, masked_id: str) -> None:
        super().__init__(f"Could not find a cart with ID {masked_id}.")
        self.masked_id = masked_id


@dataclass(frozen=True)
class PriorityOutcome:
    """Tagged outcome of a priority delivery check.

    ``error`` is distinct from ``disabled``; callers still fail open on it.
    """

    status: OutcomeStatus
    tooltip: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def enabled(cls, tooltip: str | None) -> PriorityOutcome:
        return cls(status="enabled", tooltip=tooltip)

    @classmethod
    def disabled(cls) -> PriorityOutcome:
        return cls(status="disabled")

    @classmethod
    def error(cls, kind: ErrorKind) -> PriorityOutcome:
        return cls(status="error", error_kind=kind)

    @classmethod
    def from_result(cls, result: EvaluationResult) -> PriorityOutcome:
        if result.priority_enabled:
            return cls.enabled(result.toolkit)
        return cls.disabled()

    @property
    def priority_enabled(self) -> bool:
        """Fail-open view: only an explicit blackout disables priority delivery."""
        return self.status != "disabled"


def read_priority(product: Product, attribute: str) -> int:
    """Read a product's priority flag; unset counts as 0."""
    value = getattr(product, attribute)
    if value is None:
        return 0
    return int(value)


def get_product_by_sku(db: Session, sku: str) -> Product:
    """Return product by SKU or raise ProductNotFoundError."""
    product: Product | None = db.query(Product).filter(Product.sku == sku).first()
    if product is None:
        raise ProductNotFoundError(sku)
    return product


def get_cart_by_masked_id(db: Session, masked_id: str) -> Cart:
    """Return active cart by masked id or raise CartNotFoundError."""
    cart: Cart | None = (
        db.query(Cart)
        .filter(Cart.masked_id == masked_id, Cart.is_active.is_(True))
        .first()
    )
    if cart is None:
        raise CartNotFoundError(masked_id)
    return cart


def _load_config(db: Session) -> BlackoutConfig:
    return load_blackout_config(SettingsConfigurationProvider(db))


def evaluate_cart(cart: Cart, config: BlackoutConfig, now: datetime, zone: ZoneInfo) -> EvaluationResult:
    """Evaluate every visible cart item against one configuration snapshot."""
    results: list[EvaluationResult] = []
    for item in cart.visible_items:
        result: EvaluationResult = evaluate(
            read_priority(item.product, CART_ITEM_PRIORITY_ATTRIBUTE),
            config,
            now,
            zone,
        )
        logger.debug("[PRIORITY] cart=%s item=%s enabled=%s", cart.masked_id, item.name, result.priority_enabled)
        results.append(result)
    return aggregate_results(results, config.tooltip)


def check_product_priority(db: Session, sku: str, *, now: datetime, zone: ZoneInfo) -> PriorityOutcome:
    """Check priority delivery for a single product SKU.

    Unknown SKUs raise ProductNotFoundError; other failures fail open with an error outcome.
    """
    logger.info("[PRIORITY] Checking priority delivery for SKU: %s", sku)
    try:
        product: Product = get_product_by_sku(db, sku)
        config: BlackoutConfig = _load_config(db)
        result: EvaluationResult = evaluate(read_priority(product, PRODUCT_PRIORITY_ATTRIBUTE), config, now, zone)
    except PriorityDeliveryNotFoundError:
        raise
    except ConfigurationError as exc:
        logger.warning("[PRIORITY] Blackout configuration invalid while checking SKU %s: %s", sku, exc)
        return PriorityOutcome.error("configuration")
    except Exception:
        logger.exception("[PRIORITY] Unexpected error while checking priority delivery for SKU %s", sku)
        return PriorityOutcome.error("unexpected")
    return PriorityOutcome.from_result(result)


def check_cart_priority(db: Session, masked_id: str, *, now: datetime, zone: ZoneInfo) -> PriorityOutcome:
    """Check priority delivery for all visible items of a cart.

    Priority delivery is disabled when any item is in blackout.
    """
    logger.info("[PRIORITY] Checking priority delivery for cart: %s", masked_id)
    try:
        cart: Cart = get_cart_by_masked_id(db, masked_id)
        config: BlackoutConfig = _load_config(db)
        result: EvaluationResult = evaluate_cart(cart, config, now, zone)
    except PriorityDeliveryNotFoundError:
        raise
    except ConfigurationError as exc:
        logger.warning("[PRIORITY] Blackout configuration invalid while checking cart %s: %s", masked_id, exc)
        return PriorityOutcome.error("configuration")
    except Exception:
        logger.exception("[PRIORITY] Unexpected error while checking priority delivery for cart %s", masked_id)
        return PriorityOutcome.error("unexpected")
    return PriorityOutcome.from_result(result)
