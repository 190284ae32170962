# app/api/endpoints/menus.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.schemas import MenuRow
from app.services import catalog

router = APIRouter()


@router.get("", response_model=List[MenuRow])
def list_menus(db: Session = Depends(get_db)):
    return catalog.list_menus(db)
