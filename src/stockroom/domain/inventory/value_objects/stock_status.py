"""Stock status and the quantity-to-status rule."""

from enum import Enum

# Quantities up to and including this value count as low stock.
LOW_STOCK_THRESHOLD = 10


class StockStatus(str, Enum):
    """Stock level of an inventory item."""

    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


def derive_stock_status(quantity: int) -> StockStatus:
    """Map a quantity to its stock status.

    ``quantity <= 0`` is out of stock, ``1..LOW_STOCK_THRESHOLD`` is low
    stock, anything above is in stock. This is the only place a status is
    computed.
    """
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK
