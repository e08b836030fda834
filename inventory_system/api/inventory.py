from fastapi import APIRouter, Depends, HTTPException
from inventory_system.api.params import id_path
from sqlalchemy.orm import Session
from inventory_system.infrastructure.db import get_db
from inventory_system.application.inventory import InventoryService
from inventory_system.application.schemas import InventoryItemSave, InventoryItemRead

router = APIRouter(prefix="/inventory", tags=["inventory"])

@router.get("", response_model=list[InventoryItemRead])
def list_inventory(db: Session = Depends(get_db)):
    return InventoryService(db).list()

@router.post("", response_model=InventoryItemRead)
def save_item(payload: InventoryItemSave, db: Session = Depends(get_db)):
    """Create an item, or update it when the body carries an existing id."""
    return InventoryService(db).save(payload)

@router.get("/{item_id}", response_model=InventoryItemRead)
def get_item(item_id: int = id_path("Item id"), db: Session = Depends(get_db)):
    item = InventoryService(db).get(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item

@router.delete("/{item_id}", status_code=200)
def delete_item(item_id: int = id_path("Item id"), db: Session = Depends(get_db)):
    # Deleting an unknown id is not an error
    InventoryService(db).delete(item_id)
    return None
