"""Priority delivery availability endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from priority_delivery.db.session import get_db
from priority_delivery.schemas.priority_delivery import PriorityDeliveryResponse
from priority_delivery.services.priority_delivery_service import (
    CartNotFoundError,
    ProductNotFoundError,
    check_cart_priority,
    check_product_priority,
)
from priority_delivery.utils.time import current_delivery_datetime, delivery_zone

router: APIRouter = APIRouter()


@router.get("/products/{sku}", response_model=PriorityDeliveryResponse)
def product_priority_delivery(sku: str, db: Session = Depends(get_db)) -> PriorityDeliveryResponse:
    """Return whether priority delivery is available for a product."""
    try:
        outcome = check_product_priority(db, sku, now=current_delivery_datetime(), zone=delivery_zone())
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return PriorityDeliveryResponse.from_outcome(outcome)


@router.get("/carts/{cart_id}", response_model=PriorityDeliveryResponse)
def cart_priority_delivery(cart_id: str, db: Session = Depends(get_db)) -> PriorityDeliveryResponse:
    """Return whether priority delivery is available for every item of a cart."""
    try:
        outcome = check_cart_priority(db, cart_id, now=current_delivery_datetime(), zone=delivery_zone())
    except CartNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return PriorityDeliveryResponse.from_outcome(outcome)
