"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They load
entities through user-scoped repositories, apply domain rules and save
the result. Committing the unit of work is left to the caller.
"""

from stockroom.application.commands.inventory import (
    CreateInventoryItemCommand,
    DeleteInventoryItemCommand,
    UpdateInventoryItemCommand,
)

__all__ = [
    "CreateInventoryItemCommand",
    "DeleteInventoryItemCommand",
    "UpdateInventoryItemCommand",
]
