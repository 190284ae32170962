# app/models/sql_models.py
from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey
from app.core.database import Base

class User(Base):
    __tablename__ = "tbl_users"
    id = Column(Integer, primary_key=True, index=True)
    firstname = Column(String(100))
    fullname = Column(String(200))
    lastname = Column(String(100))
    username = Column(String(100), unique=True, index=True)
    password = Column(String(255))
    status = Column(String(50))
    created_at = Column(DateTime)
    updated_at = Column(DateTime)

class Customer(Base):
    __tablename__ = "tbl_customers"
    id = Column(Integer, primary_key=True, index=True)
    prefix = Column(String(20))
    firstname = Column(String(100))
    lastname = Column(String(100))
    username = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    address = Column(Text)
    email = Column(String(255), unique=True, index=True)
    phone_number = Column(String(30))

class Shop(Base):
    __tablename__ = "tbl_restaurants"
    shop_id = Column(Integer, primary_key=True, index=True)
    shop_name = Column(String(200))
    shop_address = Column(Text)

class MenuItem(Base):
    __tablename__ = "tbl_menus"
    menu_id = Column(Integer, primary_key=True, index=True)
    menu_name = Column(String(200))
    menu_description = Column(Text)
    price = Column(Float, nullable=False)
    shop_id = Column(Integer, ForeignKey("tbl_restaurants.shop_id"), nullable=False)

class Order(Base):
    __tablename__ = "tbl_orders"
    order_id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("tbl_customers.id"), nullable=False, index=True)
    shop_id = Column(Integer, ForeignKey("tbl_restaurants.shop_id"), nullable=False)
    menu_id = Column(Integer, ForeignKey("tbl_menus.menu_id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)  # unit price at the time of ordering
    total = Column(Float, nullable=False)
    order_date = Column(DateTime, nullable=False)
