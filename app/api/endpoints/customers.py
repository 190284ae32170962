# app/api/endpoints/customers.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_customer
from app.core.database import get_db
from app.models.schemas import CustomerResponse
from app.services import customers

router = APIRouter(dependencies=[Depends(get_current_customer)])


@router.get("", response_model=List[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    return customers.list_customers(db)
