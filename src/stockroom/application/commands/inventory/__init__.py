from stockroom.application.commands.inventory.create_item_command import (
    CreateInventoryItemCommand,
)
from stockroom.application.commands.inventory.delete_item_command import (
    DeleteInventoryItemCommand,
)
from stockroom.application.commands.inventory.update_item_command import (
    UpdateInventoryItemCommand,
)

__all__ = [
    "CreateInventoryItemCommand",
    "DeleteInventoryItemCommand",
    "UpdateInventoryItemCommand",
]
