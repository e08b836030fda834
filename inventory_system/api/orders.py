from fastapi import APIRouter, Depends
from inventory_system.api.params import id_path
from sqlalchemy.orm import Session
from inventory_system.infrastructure.db import get_db
from inventory_system.application.orders import OrderService
from inventory_system.application.schemas import OrderCreate, OrderRead

router = APIRouter(prefix="/orders", tags=["orders"])

@router.get("", response_model=list[OrderRead])
def list_orders(db: Session = Depends(get_db)):
    service = OrderService(db)
    return [service.resolve(order) for order in service.list()]

@router.post("", response_model=OrderRead)
def place_order(payload: OrderCreate, db: Session = Depends(get_db)):
    """Place an order. Answers 200 either way; check ``status`` for the outcome."""
    service = OrderService(db)
    order = service.place_order(payload.customer_id, payload.item_id, payload.quantity)
    return service.resolve(order)

@router.get("/{customer_id}", response_model=list[OrderRead])
def list_customer_orders(customer_id: int = id_path("Customer id"), db: Session = Depends(get_db)):
    service = OrderService(db)
    return [service.resolve(order) for order in service.list_by_customer(customer_id)]
