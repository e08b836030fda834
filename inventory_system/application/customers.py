from sqlalchemy.orm import Session
from typing import Optional
from inventory_system.domain.models import Customer
from .errors import require_session
from .schemas import CustomerCreate

class CustomerService:
    def __init__(self, db: Session):
        self.db = require_session(db, "CustomerService")

    def list(self):
        return self.db.query(Customer).order_by(Customer.id).all()

    def get(self, customer_id: int) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def create(self, data: CustomerCreate):
        obj = Customer(name=data.name)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def rename(self, customer_id: int, name: str) -> Optional[Customer]:
        customer = self.get(customer_id)
        if not customer:
            return None
        customer.name = name
        self.db.commit()
        self.db.refresh(customer)
        return customer
