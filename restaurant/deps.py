from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from .models import Restaurant
from . import service

def require_restaurant(restaurant_id: int, db: Session = Depends(get_db)) -> Restaurant:
    restaurant = service.get_restaurant(db, restaurant_id)
    if not restaurant:
        raise HTTPException(status_code=404, detail="restaurant not found")
    return restaurant
