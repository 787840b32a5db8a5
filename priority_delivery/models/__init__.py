"""Application models package."""

from priority_delivery.models.app_setting import AppSetting
from priority_delivery.models.cart import Cart, CartItem
from priority_delivery.models.product import Product

__all__ = ["AppSetting", "Cart", "CartItem", "Product"]
