from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from inventory_system.domain.models import OrderStatus

# Range of the INTEGER columns backing ids and quantities
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

class CustomerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)

class CustomerRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class InventoryItemSave(BaseModel):
    # Present when updating an existing item
    id: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)
    name: str = Field(min_length=1, max_length=200)
    quantity: int = Field(ge=0, le=INT32_MAX)

class InventoryItemRead(BaseModel):
    id: int
    name: str
    quantity: int

    class Config:
        from_attributes = True

class OrderCreate(BaseModel):
    customer_id: int = Field(alias="customerId", ge=INT32_MIN, le=INT32_MAX)
    item_id: int = Field(alias="itemId", ge=INT32_MIN, le=INT32_MAX)
    # Zero and negative values are accepted and recorded as REJECTED
    quantity: int = Field(ge=INT32_MIN, le=INT32_MAX)

    class Config:
        populate_by_name = True

class OrderRead(BaseModel):
    id: int
    customer_id: Optional[int] = None
    item_id: Optional[int] = None
    # Resolved at read time; null when the reference does not resolve
    customer: Optional[CustomerRead] = None
    item: Optional[InventoryItemRead] = None
    quantity: int
    status: OrderStatus
    created_at: datetime
    customer_name_snapshot: Optional[str] = None
    item_name_snapshot: Optional[str] = None
