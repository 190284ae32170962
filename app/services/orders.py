# app/services/orders.py
import logging
from datetime import datetime
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import OrderNotFound, ValidationError, store_errors
from app.core.security import TokenSubject
from app.models.sql_models import Customer, MenuItem, Order
from app.services.catalog import get_price

logger = logging.getLogger(__name__)


def _check_order_fields(shop_id, menu_id, quantity):
    if menu_id is None:
        raise ValidationError("menu_id is required")
    if shop_id is None:
        raise ValidationError("shop_id is required")
    if quantity is None:
        raise ValidationError("quantity is required")
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("quantity must be an integer")


def place_order(db: Session, customer_id: int, shop_id: int, menu_id: int, quantity: int) -> Order:
    """Prices one menu line and records it as a new order.

    The unit price is copied into the row, so later menu price changes
    leave existing orders alone. Identical requests create identical
    orders; there is no idempotency key.

    Zero and negative quantities are accepted and priced as given. Whether
    they should be refused is still an open product question.
    """
    _check_order_fields(shop_id, menu_id, quantity)

    with store_errors("Failed to place order"):
        price = get_price(db, menu_id)
        total = price * quantity

        order = Order(
            customer_id=customer_id,
            shop_id=shop_id,
            menu_id=menu_id,
            quantity=quantity,
            price=price,
            total=total,
            order_date=datetime.now(),
        )
        db.add(order)
        db.commit()
        # Re-select so the confirmation shows what the database stored
        db.refresh(order)

    logger.info("Order %s placed: customer=%s menu=%s qty=%s total=%s",
                order.order_id, customer_id, menu_id, quantity, total)
    return order


def list_orders(db: Session, customer_id: int):
    with store_errors("Failed to fetch orders"):
        return db.query(Order).filter(Order.customer_id == customer_id).order_by(Order.order_id).all()


def get_order(db: Session, customer_id: int, order_id: int) -> Order:
    with store_errors("Failed to fetch order"):
        order = db.query(Order).filter(Order.order_id == order_id, Order.customer_id == customer_id).first()
    if not order:
        raise OrderNotFound("Order not found")
    return order


def summarize(db: Session, subject: TokenSubject) -> dict:
    """Total spent by the token's customer, with their display name.

    A customer with no orders gets a zero total and the first name carried
    in the token instead of the stored name.
    """
    customer_name = Customer.firstname + " " + Customer.lastname

    with store_errors("Failed to get summary"):
        row = db.query(
            customer_name.label("customer_name"),
            func.sum(Order.total).label("total_amount"),
        ).select_from(Order)\
            .join(Customer, Order.customer_id == Customer.id)\
            .join(MenuItem, Order.menu_id == MenuItem.menu_id)\
            .filter(Order.customer_id == subject.id)\
            .group_by(Customer.id, Customer.firstname, Customer.lastname)\
            .first()

    return {
        "customer_name": (row.customer_name if row else None) or subject.firstname,
        "total_amount": (row.total_amount if row else None) or 0,
    }
