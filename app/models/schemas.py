# app/models/schemas.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional


class MessageResponse(BaseModel):
    message: str


# --- Auth ---
class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class LoginResponse(BaseModel):
    message: str
    token: str


# --- Customers ---
class RegisterRequest(BaseModel):
    prefix: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None

class RegisterResponse(BaseModel):
    message: str
    id: int

class CustomerResponse(BaseModel):
    id: int
    prefix: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    username: str
    address: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None

    # Pydantic V2 Config to read SQLAlchemy models
    model_config = {"from_attributes": True}


# --- Menus ---
class MenuRow(BaseModel):
    menu_id: int
    menu_name: Optional[str] = None
    menu_description: Optional[str] = None
    price: float
    shop_id: int
    shop_name: Optional[str] = None
    shop_address: Optional[str] = None

    model_config = {"from_attributes": True}


# --- Orders ---
class OrderRequest(BaseModel):
    shop_id: Optional[int] = None
    menu_id: Optional[int] = None
    quantity: Optional[int] = None

class OrderResponse(BaseModel):
    order_id: int
    customer_id: int
    shop_id: int
    menu_id: int
    quantity: int
    price: float
    total: float
    order_date: datetime

    model_config = {"from_attributes": True}

class OrderConfirmation(OrderResponse):
    message: str = "Order placed successfully"

class OrderSummary(BaseModel):
    customer_name: Optional[str] = None
    total_amount: float = Field(0, description="Sum of every order total for the customer")


# --- Users ---
class UserCreate(BaseModel):
    firstname: Optional[str] = None
    fullname: Optional[str] = None
    lastname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    status: Optional[str] = None

class UserUpdate(UserCreate):
    pass

class UserResponse(BaseModel):
    id: int
    firstname: Optional[str] = None
    fullname: Optional[str] = None
    lastname: Optional[str] = None
    username: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}