# app/api/endpoints/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_hasher, get_tokens
from app.core.database import get_db
from app.core.security import PasswordHasher, TokenService
from app.models.schemas import LoginRequest, LoginResponse, MessageResponse, RegisterRequest, RegisterResponse
from app.services import customers

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenService = Depends(get_tokens),
):
    token = customers.authenticate(db, hasher, tokens, payload.username, payload.password)
    return {"message": "Login successful", "token": token}


@router.post("/register", response_model=RegisterResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db), hasher: PasswordHasher = Depends(get_hasher)):
    customer = customers.register_customer(db, hasher, payload)
    return {"message": "Register successful", "id": customer.id}


# Tokens are stateless; the client just drops it
@router.post("/logout", response_model=MessageResponse)
def logout():
    return {"message": "Logged out successfully"}
