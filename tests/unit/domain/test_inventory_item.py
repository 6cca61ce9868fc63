"""Unit tests for the InventoryItem entity."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from stockroom.domain.inventory import (
    InvalidInventoryItemError,
    InventoryItem,
    StockStatus,
)
from stockroom.domain.inventory.entities.inventory_item import QUANTITY_MAX
from stockroom.domain.shared import ValidationError


class TestInventoryItemCreate:
    def setup_method(self):
        self.user_id = uuid4()

    def test_create_derives_status_from_quantity(self):
        item = InventoryItem.create(self.user_id, "Widget", 5, "Tools")

        assert item.status == StockStatus.LOW_STOCK
        assert item.user_id == self.user_id
        assert item.created_at == item.updated_at

    def test_create_trims_name_and_category(self):
        item = InventoryItem.create(self.user_id, "  Widget  ", 20, " Tools ")

        assert item.name == "Widget"
        assert item.category == "Tools"
        assert item.status == StockStatus.IN_STOCK

    def test_create_generates_unique_ids(self):
        first = InventoryItem.create(self.user_id, "Widget", 1, "Tools")
        second = InventoryItem.create(self.user_id, "Widget", 1, "Tools")

        assert first.id != second.id

    @pytest.mark.parametrize("name", ["", "   ", "A", "x" * 101, None])
    def test_invalid_name_is_rejected(self, name):
        with pytest.raises(InvalidInventoryItemError) as exc_info:
            InventoryItem.create(self.user_id, name, 1, "Tools")

        assert exc_info.value.field == "name"

    @pytest.mark.parametrize("category", ["", "T", "x" * 51, None])
    def test_invalid_category_is_rejected(self, category):
        with pytest.raises(InvalidInventoryItemError) as exc_info:
            InventoryItem.create(self.user_id, "Widget", 1, category)

        assert exc_info.value.field == "category"

    @pytest.mark.parametrize("quantity", [-1, 1.5, "5", None, True])
    def test_invalid_quantity_is_rejected(self, quantity):
        with pytest.raises(InvalidInventoryItemError) as exc_info:
            InventoryItem.create(self.user_id, "Widget", quantity, "Tools")

        assert exc_info.value.field == "quantity"

    def test_quantity_upper_bound(self):
        item = InventoryItem.create(self.user_id, "Screws", QUANTITY_MAX, "Tools")
        assert item.quantity == QUANTITY_MAX

        with pytest.raises(InvalidInventoryItemError) as exc_info:
            InventoryItem.create(self.user_id, "Screws", QUANTITY_MAX + 1, "Tools")

        assert exc_info.value.field == "quantity"
        assert str(QUANTITY_MAX) in exc_info.value.message

    def test_length_limits_are_inclusive(self):
        item = InventoryItem.create(self.user_id, "x" * 100, 0, "y" * 50)

        assert len(item.name) == 100
        assert len(item.category) == 50

    def test_invalid_item_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            InventoryItem.create(self.user_id, "W", 1, "Tools")


class TestInventoryItemApplyChanges:
    def setup_method(self):
        past = datetime.now(tz=timezone.utc) - timedelta(days=1)
        self.item = InventoryItem.reconstitute(
            id=uuid4(),
            user_id=uuid4(),
            name="Widget",
            quantity=5,
            category="Tools",
            created_at=past,
            updated_at=past,
        )

    def test_quantity_change_recomputes_status(self):
        self.item.apply_changes(quantity=0)

        assert self.item.quantity == 0
        assert self.item.status == StockStatus.OUT_OF_STOCK

    def test_omitted_fields_are_kept(self):
        self.item.apply_changes(name="Gadget")

        assert self.item.name == "Gadget"
        assert self.item.quantity == 5
        assert self.item.category == "Tools"

    def test_empty_change_keeps_status_and_bumps_updated_at(self):
        before = self.item.updated_at

        self.item.apply_changes()

        assert self.item.status == StockStatus.LOW_STOCK
        assert self.item.updated_at > before
        assert self.item.created_at == before

    def test_rejected_change_leaves_item_untouched(self):
        with pytest.raises(InvalidInventoryItemError):
            self.item.apply_changes(name="Gadget", quantity=-5)

        assert self.item.name == "Widget"
        assert self.item.quantity == 5

    def test_reconstitute_derives_status(self):
        item = InventoryItem.reconstitute(
            id=uuid4(),
            user_id=uuid4(),
            name="Bolts",
            quantity=500,
            category="Hardware",
            created_at=datetime.now(tz=timezone.utc),
            updated_at=datetime.now(tz=timezone.utc),
        )

        assert item.status == StockStatus.IN_STOCK
