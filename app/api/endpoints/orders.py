# app/api/endpoints/orders.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_customer
from app.core.database import get_db
from app.core.security import TokenSubject
from app.models.schemas import OrderConfirmation, OrderRequest, OrderResponse, OrderSummary
from app.services import orders

router = APIRouter()


@router.post("", status_code=201, response_model=OrderConfirmation)
def place_order(
    payload: OrderRequest,
    db: Session = Depends(get_db),
    subject: TokenSubject = Depends(get_current_customer),
):
    order = orders.place_order(db, subject.id, payload.shop_id, payload.menu_id, payload.quantity)
    return OrderConfirmation.model_validate(order)


@router.get("", response_model=List[OrderResponse])
def list_orders(db: Session = Depends(get_db), subject: TokenSubject = Depends(get_current_customer)):
    return orders.list_orders(db, subject.id)


# Must stay above /{order_id}
@router.get("/summary", response_model=OrderSummary)
def order_summary(db: Session = Depends(get_db), subject: TokenSubject = Depends(get_current_customer)):
    return orders.summarize(db, subject)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: int, db: Session = Depends(get_db), subject: TokenSubject = Depends(get_current_customer)):
    return orders.get_order(db, subject.id, order_id)
