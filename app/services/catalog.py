# app/services/catalog.py
from sqlalchemy.orm import Session

from app.core.errors import MenuItemNotFound, store_errors
from app.models.sql_models import MenuItem, Shop


def list_menus(db: Session):
    """Every menu item with the shop that sells it. No paging, no filters."""
    with store_errors("Failed to fetch menus"):
        rows = db.query(
            MenuItem.menu_id,
            MenuItem.menu_name,
            MenuItem.menu_description,
            MenuItem.price,
            Shop.shop_id,
            Shop.shop_name,
            Shop.shop_address,
        ).join(Shop, MenuItem.shop_id == Shop.shop_id).order_by(MenuItem.menu_id).all()
    return [dict(row._mapping) for row in rows]


def get_price(db: Session, menu_id: int) -> float:
    row = db.query(MenuItem.price).filter(MenuItem.menu_id == menu_id).first()
    if row is None:
        raise MenuItemNotFound("Menu not found")
    return row.price
