from fastapi import APIRouter, Depends, HTTPException
from inventory_system.api.params import id_path
from sqlalchemy.orm import Session
from inventory_system.infrastructure.db import get_db
from inventory_system.application.customers import CustomerService
from inventory_system.application.schemas import CustomerCreate, CustomerRead

router = APIRouter(prefix="/customers", tags=["customers"])

@router.get("", response_model=list[CustomerRead])
def list_customers(db: Session = Depends(get_db)):
    return CustomerService(db).list()

@router.post("", response_model=CustomerRead)
def create_customer(payload: CustomerCreate, db: Session = Depends(get_db)):
    return CustomerService(db).create(payload)

@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(customer_id: int = id_path("Customer id"), db: Session = Depends(get_db)):
    customer = CustomerService(db).get(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer

@router.put("/{customer_id}", response_model=CustomerRead)
def rename_customer(payload: CustomerCreate, customer_id: int = id_path("Customer id"), db: Session = Depends(get_db)):
    customer = CustomerService(db).rename(customer_id, payload.name)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer
