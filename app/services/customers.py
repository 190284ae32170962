# app/services/customers.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.errors import Conflict, Unauthenticated, ValidationError, is_duplicate_key, store_errors
from app.core.security import PasswordHasher, TokenService
from app.models.schemas import RegisterRequest
from app.models.sql_models import Customer

logger = logging.getLogger(__name__)


def register_customer(db: Session, hasher: PasswordHasher, data: RegisterRequest) -> Customer:
    if not data.username:
        raise ValidationError("Username is required")
    if not data.password:
        raise ValidationError("Password is required")

    customer = Customer(
        prefix=data.prefix,
        firstname=data.firstname,
        lastname=data.lastname,
        username=data.username,
        password=hasher.hash(data.password),
        address=data.address,
        email=data.email,
        phone_number=data.phone_number,
    )

    with store_errors("Insert failed"):
        try:
            db.add(customer)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            if not is_duplicate_key(exc):
                raise
            logger.info("Duplicate registration for username=%s", data.username)
            raise Conflict("Username or Email already exists!")
        db.refresh(customer)

    logger.info("Registered customer id=%s username=%s", customer.id, customer.username)
    return customer


def authenticate(db: Session, hasher: PasswordHasher, tokens: TokenService, username: str, password: str) -> str:
    """Checks a username/password pair and returns a fresh bearer token."""
    if not username or not password:
        raise ValidationError("Username and password are required")

    with store_errors("Login failed"):
        customer = db.query(Customer).filter(Customer.username == username).first()

    if not customer:
        raise Unauthenticated("User not found")
    if not hasher.verify(password, customer.password):
        logger.info("Wrong password for username=%s", username)
        raise Unauthenticated("Invalid password")

    logger.info("Customer id=%s logged in", customer.id)
    return tokens.issue(customer)


def list_customers(db: Session):
    with store_errors("Query failed"):
        return db.query(Customer).order_by(Customer.id).all()
