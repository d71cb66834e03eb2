"""Marketplace listings and orders."""

from enum import Enum
from typing import Union

from .base import LedgerRecord

Amount = Union[int, float]


class OrderStatus(str, Enum):
    """Order status values.

    Only ``placed`` is ever assigned; no transitions are defined.
    """

    PLACED = "placed"


class Product(LedgerRecord):
    """A product listed by a seller."""

    seller: str
    name: str
    description: str
    price: Amount
    stock: Amount


class Order(LedgerRecord):
    """A buyer's order against a product listing."""

    buyer: str
    product_id: int
    quantity: Amount
    total_price: Amount
    status: OrderStatus = OrderStatus.PLACED
