from sqlalchemy import update, delete
from sqlalchemy.orm import Session
from typing import Optional
from shared.core import get_logger
from inventory_system.domain.models import InventoryItem
from .errors import require_session
from .schemas import InventoryItemSave

logger = get_logger(__name__)

class InventoryService:
    """Stock store access plus the stock adjustment used by order placement."""

    def __init__(self, db: Session):
        self.db = require_session(db, "InventoryService")

    def list(self):
        return self.db.query(InventoryItem).order_by(InventoryItem.id).all()

    def get(self, item_id: int) -> Optional[InventoryItem]:
        return self.db.get(InventoryItem, item_id)

    def save(self, data: InventoryItemSave):
        """Update the item when ``data.id`` resolves, insert a new one otherwise."""
        item = self.get(data.id) if data.id is not None else None
        if item is None:
            item = InventoryItem(name=data.name, quantity=data.quantity)
            self.db.add(item)
        else:
            item.name = data.name
            item.quantity = data.quantity
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item_id: int) -> None:
        self.db.execute(delete(InventoryItem).where(InventoryItem.id == item_id))
        self.db.commit()

    def decrease_stock(self, item_id: int, quantity: int) -> bool:
        """
        Take ``quantity`` units out of an item's stock.

        The sufficiency check and the decrement are a single conditional
        UPDATE, so concurrent placements can never drive stock below zero.
        Returns False, changing nothing, when the item is missing, holds
        fewer than ``quantity`` units, or ``quantity`` is not positive.

        Does not commit: the caller owns the transaction.
        """
        if quantity <= 0:
            return False
        result = self.db.execute(
            update(InventoryItem)
            .where(InventoryItem.id == item_id, InventoryItem.quantity >= quantity)
            .values(quantity=InventoryItem.quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        decreased = result.rowcount == 1
        if decreased:
            # Bring any cached instance up to date with the new quantity
            self.db.get(InventoryItem, item_id, populate_existing=True)
        logger.debug(
            "Stock decrease %s for item %s",
            "applied" if decreased else "refused",
            item_id,
            extra={'extra_fields': {'item_id': item_id, 'quantity': quantity, 'applied': decreased}}
        )
        return decreased
