"""Tests for HealthMarketplaceContract."""

import pytest
from pydantic import ValidationError

from health_ledger.models import OrderStatus

DESCRIPTION = "High-quality Vitamin C supplement"


@pytest.fixture
def listed(marketplace):
    """Marketplace with Vitamin C listed by seller1 as product 1."""
    marketplace.list_product("seller1", "Vitamin C", DESCRIPTION, 1000, 100)
    return marketplace


class TestListProduct:
    """Test listing products."""

    def test_list_returns_first_id(self, marketplace):
        """Test the first listing gets id 1 and is stored."""
        result = marketplace.list_product(
            "seller1", "Vitamin C", DESCRIPTION, 1000, 100
        )

        assert result.success is True
        assert result.value == 1
        product = marketplace.get_product(1).value
        assert product.name == "Vitamin C"
        assert product.price == 1000
        assert product.seller == "seller1"

    def test_ids_increase(self, marketplace):
        """Test listings get strictly increasing ids."""
        ids = [
            marketplace.list_product("seller1", f"P{i}", "", 10, 1).value
            for i in range(5)
        ]

        assert ids == [1, 2, 3, 4, 5]

    def test_fractional_price(self, marketplace):
        """Test prices and stock accept non-integer amounts."""
        result = marketplace.list_product("seller1", "Vitamin C", "", 9.99, 10)

        assert result.success is True
        assert result.value == 1
        assert marketplace.get_product(1).value.price == 9.99

        order_id = marketplace.place_order("buyer1", 1, 3).value
        order = marketplace.get_order(order_id).value
        assert order.total_price == pytest.approx(29.97)
        assert marketplace.list_product("seller1", "Zinc", "", 4.5, 1).value == 2

    def test_malformed_listing_does_not_consume_id(self, marketplace):
        """Test a listing that fails to build leaves the id sequence untouched."""
        with pytest.raises(ValidationError):
            marketplace.list_product("seller1", "Vitamin C", "", "free", 10)

        assert marketplace.get_product(1).value is None
        assert marketplace.list_product("seller1", "Zinc", "", 5, 1).value == 1


@pytest.mark.access_control
class TestUpdateProduct:
    """Test seller-only updates."""

    def test_seller_can_update(self, listed):
        """Test the seller changes price and stock."""
        result = listed.update_product("seller1", 1, 1200, 90)

        assert result.success is True
        product = listed.get_product(1).value
        assert product.price == 1200
        assert product.stock == 90

    def test_fractional_update(self, listed):
        """Test a seller can reprice with a non-integer amount."""
        result = listed.update_product("seller1", 1, 12.5, 90)

        assert result.success is True
        assert listed.get_product(1).value.price == 12.5

    def test_update_keeps_name_and_description(self, listed):
        """Test fields outside the update are untouched."""
        listed.update_product("seller1", 1, 1200, 90)

        product = listed.get_product(1).value
        assert product.name == "Vitamin C"
        assert product.description == DESCRIPTION

    def test_non_seller_cannot_update(self, listed):
        """Test another seller is refused with 102 and nothing changes."""
        before = listed.get_product(1).value

        result = listed.update_product("seller2", 1, 1200, 90)

        assert result.success is False
        assert result.error == 102
        assert listed.get_product(1).value == before

    def test_update_unknown_product(self, listed):
        """Test updating a missing listing fails with 101."""
        result = listed.update_product("seller1", 2, 1200, 90)

        assert result.success is False
        assert result.error == 101


class TestPlaceOrder:
    """Test ordering against stock."""

    def test_place_order(self, listed):
        """Test an order records total price and decrements stock."""
        result = listed.place_order("buyer1", 1, 5)

        assert result.success is True
        assert result.value == 1
        order = listed.get_order(1).value
        assert order.buyer == "buyer1"
        assert order.product_id == 1
        assert order.quantity == 5
        assert order.total_price == 5000
        assert order.status is OrderStatus.PLACED
        assert listed.get_product(1).value.stock == 95

    def test_insufficient_stock(self, listed):
        """Test ordering more than the stock fails with 101."""
        result = listed.place_order("buyer1", 1, 101)

        assert result.success is False
        assert result.error == 101
        assert listed.get_product(1).value.stock == 100
        assert listed.get_order(1).value is None

    def test_order_entire_stock(self, listed):
        """Test ordering exactly the remaining stock succeeds."""
        result = listed.place_order("buyer1", 1, 100)

        assert result.success is True
        assert listed.get_product(1).value.stock == 0
        assert listed.place_order("buyer2", 1, 1).error == 101

    def test_unknown_product(self, marketplace):
        """Test ordering a missing product fails with 101."""
        result = marketplace.place_order("buyer1", 7, 1)

        assert result.success is False
        assert result.error == 101

    def test_order_ids_independent_of_product_ids(self, listed):
        """Test orders and products are numbered separately."""
        listed.list_product("seller1", "Zinc", "", 200, 10)

        assert listed.place_order("buyer1", 2, 1).value == 1
        assert listed.place_order("buyer1", 1, 1).value == 2

    def test_total_uses_current_price(self, listed):
        """Test an order after a reprice uses the new price."""
        listed.update_product("seller1", 1, 1200, 100)

        listed.place_order("buyer1", 1, 2)

        assert listed.get_order(1).value.total_price == 2400

    def test_order_dumps_contract_field_names(self, listed):
        """Test order records dump with camelCase names."""
        listed.place_order("buyer1", 1, 5)

        dumped = listed.get_order(1).value.to_dict()

        assert dumped["totalPrice"] == 5000
        assert dumped["productId"] == 1
        assert dumped["status"] == "placed"


class TestQueries:
    """Test lookups."""

    def test_get_unknown_product_and_order(self, marketplace):
        """Test unknown ids are successes carrying None."""
        assert marketplace.get_product(1).success is True
        assert marketplace.get_product(1).value is None
        assert marketplace.get_order(1).success is True
        assert marketplace.get_order(1).value is None

    def test_reset(self, listed):
        """Test reset restarts both id sequences."""
        listed.place_order("buyer1", 1, 1)

        listed.reset()

        assert listed.get_product(1).value is None
        assert listed.list_product("seller1", "Zinc", "", 1, 1).value == 1
        assert listed.place_order("buyer1", 1, 1).value == 1
