"""Tests for KeyedRecordTable."""

import pytest

from health_ledger.core import KeyedRecordTable
from health_ledger.models import Product
from health_ledger.utils.exceptions import RecordNotFoundError


@pytest.fixture
def table():
    """Table holding one product under id 1."""
    products = KeyedRecordTable("products")
    products.create(
        1,
        Product(
            seller="seller1",
            name="Vitamin C",
            description="High-quality Vitamin C supplement",
            price=1000,
            stock=100,
        ),
    )
    return products


class TestCreateAndRead:
    """Test inserts and lookups."""

    def test_read_returns_stored_record(self, table):
        """Test a created record can be read back."""
        product = table.read(1)

        assert product is not None
        assert product.name == "Vitamin C"
        assert product.price == 1000

    def test_read_unknown_key_returns_none(self, table):
        """Test unknown keys read as None rather than raising."""
        assert table.read(99) is None

    def test_create_overwrites_existing_key(self, table):
        """Test creating at an existing key silently replaces the record."""
        table.create(
            1,
            Product(seller="seller2", name="Zinc", description="", price=5, stock=1),
        )

        assert table.read(1).seller == "seller2"

    def test_string_keys(self):
        """Test natural string keys are supported."""
        devices = KeyedRecordTable("devices")
        devices.create("device1", {"owner": "user1"})

        assert devices.read("device1") == {"owner": "user1"}

    def test_read_returns_copy(self, table):
        """Test mutating a read result does not touch the stored record."""
        product = table.read(1)
        product.stock = 0

        assert table.read(1).stock == 100

    def test_clear(self, table):
        """Test clear drops every record."""
        table.clear()

        assert table.read(1) is None


class TestUpdate:
    """Test partial in-place updates."""

    def test_update_changes_only_mutated_fields(self, table):
        """Test fields the mutator leaves alone keep their values."""

        def _reprice(product):
            product.price = 1200
            product.stock = 90

        updated = table.update(1, _reprice)

        assert updated.price == 1200
        stored = table.read(1)
        assert stored.stock == 90
        assert stored.name == "Vitamin C"
        assert stored.description == "High-quality Vitamin C supplement"

    def test_update_supports_arithmetic(self, table):
        """Test numeric fields can be adjusted relative to their value."""

        def _take(product):
            product.stock -= 5

        table.update(1, _take)

        assert table.read(1).stock == 95

    def test_update_unknown_key_raises(self, table):
        """Test updating a missing key raises RecordNotFoundError."""
        with pytest.raises(RecordNotFoundError) as exc_info:
            table.update(2, lambda product: None)

        assert exc_info.value.code == "RECORD_NOT_FOUND"
        assert exc_info.value.key == 2
        assert exc_info.value.table == "products"

    def test_failed_mutator_leaves_record_untouched(self, table):
        """Test a mutator that raises half-way does not persist its changes."""

        def _broken(product):
            product.price = 1
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            table.update(1, _broken)

        assert table.read(1).price == 1000
