"""Personalized health marketplace contract."""

from typing import Optional

from health_ledger.config import Settings
from health_ledger.core import (
    ContractResult,
    ErrorCode,
    KeyedRecordTable,
    SequentialIdAllocator,
    authorize,
)
from health_ledger.models import Order, OrderStatus, Product
from health_ledger.models.marketplace import Amount
from health_ledger.utils.logging import audit_logger, get_logger

from .base import Clock, LedgerContract

logger = get_logger(__name__)


class HealthMarketplaceContract(LedgerContract):
    """Sellers list health products; buyers place orders against stock."""

    contract_name = "health-marketplace"

    def __init__(
        self, settings: Optional[Settings] = None, clock: Optional[Clock] = None
    ) -> None:
        """Initialize the marketplace contract."""
        super().__init__(settings, clock)
        self._product_ids = SequentialIdAllocator()
        self._order_ids = SequentialIdAllocator()
        self._products: KeyedRecordTable[int, Product] = KeyedRecordTable("products")
        self._orders: KeyedRecordTable[int, Order] = KeyedRecordTable("orders")

    def _reset_state(self) -> None:
        self._product_ids.reset()
        self._order_ids.reset()
        self._products.clear()
        self._orders.clear()

    def list_product(
        self, seller: str, name: str, description: str, price: Amount, stock: Amount
    ) -> ContractResult[int]:
        """List a new product owned by ``seller``.

        Returns:
            Result carrying the new product id
        """
        with self._lock:
            listing = Product(
                seller=seller,
                name=name,
                description=description,
                price=price,
                stock=stock,
            )
            product_id = self._product_ids.next_id()
            self._products.create(product_id, listing)

        audit_logger.log_data_change(
            principal=seller,
            contract=self.contract_name,
            resource_id=product_id,
            action="list_product",
            new_value={"price": price, "stock": stock},
        )
        logger.info("Listed product", product_id=product_id, seller=seller, name=name)
        return self._succeed("list_product", product_id)

    def update_product(
        self, sender: str, product_id: int, new_price: Amount, new_stock: Amount
    ) -> ContractResult[None]:
        """Change price and stock of a listing; the seller only.

        Name and description are left untouched.
        """
        with self._lock:
            product = self._products.read(product_id)
            if product is None:
                return self._deny(
                    "update_product",
                    sender,
                    product_id,
                    ErrorCode.NOT_FOUND,
                    "product does not exist",
                )

            decision = authorize(
                sender, owner=product.seller, deny_with=ErrorCode.NOT_OWNER
            )
            if not decision:
                return self._deny(
                    "update_product",
                    sender,
                    product_id,
                    ErrorCode.NOT_OWNER,
                    "sender is not the seller",
                )

            def _apply(listing: Product) -> None:
                listing.price = new_price
                listing.stock = new_stock

            self._products.update(product_id, _apply)

        audit_logger.log_data_change(
            principal=sender,
            contract=self.contract_name,
            resource_id=product_id,
            action="update_product",
            old_value={"price": product.price, "stock": product.stock},
            new_value={"price": new_price, "stock": new_stock},
        )
        return self._succeed("update_product")

    def place_order(
        self, buyer: str, product_id: int, quantity: Amount
    ) -> ContractResult[int]:
        """Order ``quantity`` units of a product.

        Fails with ``NOT_FOUND`` when the product is unknown or has less
        than ``quantity`` in stock; stock is left unchanged in that case.

        Returns:
            Result carrying the new order id
        """
        with self._lock:
            product = self._products.read(product_id)
            if product is None:
                return self._deny(
                    "place_order",
                    buyer,
                    product_id,
                    ErrorCode.NOT_FOUND,
                    "product does not exist",
                )
            if product.stock < quantity:
                return self._deny(
                    "place_order",
                    buyer,
                    product_id,
                    ErrorCode.NOT_FOUND,
                    "insufficient stock",
                )

            total_price = product.price * quantity
            order = Order(
                buyer=buyer,
                product_id=product_id,
                quantity=quantity,
                total_price=total_price,
                status=OrderStatus.PLACED,
            )
            order_id = self._order_ids.next_id()
            self._orders.create(order_id, order)

            def _take_stock(listing: Product) -> None:
                listing.stock -= quantity

            self._products.update(product_id, _take_stock)

        logger.info(
            "Placed order",
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            total_price=total_price,
        )
        audit_logger.log_data_change(
            principal=buyer,
            contract=self.contract_name,
            resource_id=product_id,
            action="place_order",
            old_value={"stock": product.stock},
            new_value={"stock": product.stock - quantity, "orderId": order_id},
        )
        return self._succeed("place_order", order_id)

    def get_product(self, product_id: int) -> ContractResult[Product]:
        """Return the listing, or None if the id is unknown."""
        with self._lock:
            product = self._products.read(product_id)
        return self._succeed("get_product", product)

    def get_order(self, order_id: int) -> ContractResult[Order]:
        """Return the order, or None if the id is unknown."""
        with self._lock:
            order = self._orders.read(order_id)
        return self._succeed("get_order", order)
