# app/api/endpoints/users.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_hasher
from app.core.database import get_db
from app.core.security import PasswordHasher
from app.models.schemas import MessageResponse, UserCreate, UserResponse, UserUpdate
from app.services import users

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return users.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return users.get_user(db, user_id)


@router.post("", response_model=UserResponse)
def create_user(payload: UserCreate, db: Session = Depends(get_db), hasher: PasswordHasher = Depends(get_hasher)):
    return users.create_user(db, hasher, payload)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
):
    return users.update_user(db, hasher, user_id, payload)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    users.delete_user(db, user_id)
    return {"message": "User deleted successfully"}
