"""Shared SQLAlchemy base declarative class and model imports."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ORM models."""


# Import model modules so metadata is populated before create_all.
from priority_delivery.models import app_setting as _app_setting  # noqa: E402,F401
from priority_delivery.models import cart as _cart  # noqa: E402,F401
from priority_delivery.models import product as _product  # noqa: E402,F401
