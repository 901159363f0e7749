from sqlalchemy.orm import Session
from .models import Restaurant

def get_restaurant(db: Session, restaurant_id: int) -> Restaurant | None:
    return db.get(Restaurant, restaurant_id)
