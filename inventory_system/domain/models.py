from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Integer, DateTime, Enum as SAEnum
from datetime import datetime
from enum import Enum
from typing import Optional

class Base(DeclarativeBase):
    pass

class OrderStatus(str, Enum):
    """Terminal status assigned once, when the order is recorded."""
    PLACED = "PLACED"
    REJECTED = "REJECTED"

class Customer(Base):
    __tablename__ = "customers"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))

class InventoryItem(Base):
    __tablename__ = "inventory_items"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    # Only InventoryService.decrease_stock lowers this during order placement
    quantity: Mapped[int] = mapped_column(Integer)

class Order(Base):
    """Append-only audit record of one placement attempt."""
    __tablename__ = "orders"
    id: Mapped[int] = mapped_column(primary_key=True)
    # Plain identifiers (no FK): a rejected order may point at nothing,
    # and items can be deleted while orders still reference them
    customer_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    item_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer)
    status: Mapped[OrderStatus] = mapped_column(
        SAEnum(OrderStatus, native_enum=False, length=20, name="order_status")
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    # Names captured at placement time
    customer_name_snapshot: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    item_name_snapshot: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
