from fastapi import Path
from inventory_system.application.schemas import INT32_MIN, INT32_MAX

def id_path(description: str):
    return Path(ge=INT32_MIN, le=INT32_MAX, description=description)
