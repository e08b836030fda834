from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from shared.core import get_logger
from inventory_system.domain.models import Customer, InventoryItem, Order, OrderStatus
from .errors import require_session
from .inventory import InventoryService

logger = get_logger(__name__)

class OrderService:
    def __init__(self, db: Session, inventory: Optional[InventoryService] = None):
        self.db = require_session(db, "OrderService")
        self.inventory = inventory or InventoryService(db)

    def list(self):
        return self.db.query(Order).order_by(Order.id).all()

    def list_by_customer(self, customer_id: int) -> List[Order]:
        return (
            self.db.query(Order)
            .filter(Order.customer_id == customer_id)
            .order_by(Order.id)
            .all()
        )

    def count_by_status(self) -> Dict[str, int]:
        rows = self.db.query(Order.status, func.count(Order.id)).group_by(Order.status).all()
        counts = {status.value: 0 for status in OrderStatus}
        for status, count in rows:
            counts[status.value] = count
        return counts

    def place_order(self, customer_id: int, item_id: int, quantity: int) -> Order:
        """
        Record one placement attempt and return the saved order.

        Gates, first failing one wins: quantity must be positive, the
        customer and the item must exist, and the item must hold at least
        ``quantity`` units. Every attempt is persisted; only a PLACED order
        takes stock, and the decrement commits together with the order.
        """
        customer = self.db.get(Customer, customer_id)
        item = self.db.get(InventoryItem, item_id)

        if quantity <= 0:
            return self._record(customer, item, customer_id, item_id, quantity, OrderStatus.REJECTED, "invalid_quantity")
        if customer is None:
            return self._record(customer, item, customer_id, item_id, quantity, OrderStatus.REJECTED, "customer_not_found")
        if item is None:
            return self._record(customer, item, customer_id, item_id, quantity, OrderStatus.REJECTED, "item_not_found")
        if item.quantity < quantity:
            return self._record(customer, item, customer_id, item_id, quantity, OrderStatus.REJECTED, "insufficient_stock")

        try:
            taken = self.inventory.decrease_stock(item_id, quantity)
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("Stock decrease failed", exc_info=True, extra={'extra_fields': {'item_id': item_id}})
            raise
        if not taken:
            # Another placement took the stock after our read
            return self._record(customer, item, customer_id, item_id, quantity, OrderStatus.REJECTED, "stock_changed")
        return self._record(customer, item, customer_id, item_id, quantity, OrderStatus.PLACED)

    def _record(
        self,
        customer: Optional[Customer],
        item: Optional[InventoryItem],
        customer_id: int,
        item_id: int,
        quantity: int,
        status: OrderStatus,
        reason: Optional[str] = None,
    ) -> Order:
        order = Order(
            customer_id=customer.id if customer else None,
            item_id=item.id if item else None,
            quantity=quantity,
            status=status,
            customer_name_snapshot=customer.name if customer else None,
            item_name_snapshot=item.name if item else None,
        )
        try:
            self.db.add(order)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(
                "Failed to persist order",
                exc_info=True,
                extra={'extra_fields': {'customer_id': customer_id, 'item_id': item_id, 'status': status.value}}
            )
            raise
        self.db.refresh(order)

        fields = {
            'order_id': order.id,
            'customer_id': customer_id,
            'item_id': item_id,
            'quantity': quantity,
            'status': status.value,
        }
        if reason:
            fields['reason'] = reason
        logger.info(f"Order {order.id} {status.value}", extra={'extra_fields': fields})
        return order

    def resolve(self, order: Order) -> dict:
        """Order as served over HTTP, with customer and item looked up now."""
        customer = self.db.get(Customer, order.customer_id) if order.customer_id is not None else None
        item = self.db.get(InventoryItem, order.item_id) if order.item_id is not None else None
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "item_id": order.item_id,
            "customer": customer,
            "item": item,
            "quantity": order.quantity,
            "status": order.status,
            "created_at": order.created_at,
            "customer_name_snapshot": order.customer_name_snapshot,
            "item_name_snapshot": order.item_name_snapshot,
        }
