# app/services/users.py
import logging
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.errors import Conflict, UserNotFound, ValidationError, is_duplicate_key, store_errors
from app.core.security import PasswordHasher
from app.models.schemas import UserCreate, UserUpdate
from app.models.sql_models import User

logger = logging.getLogger(__name__)

# Columns a client may set directly; password is handled separately
EDITABLE_FIELDS = ("firstname", "fullname", "lastname", "username", "status")


def list_users(db: Session):
    with store_errors("Query failed"):
        return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    with store_errors("Query failed"):
        user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UserNotFound("User not found")
    return user


def create_user(db: Session, hasher: PasswordHasher, data: UserCreate) -> User:
    if not data.password:
        raise ValidationError("Password is required")

    now = datetime.now()
    user = User(
        firstname=data.firstname,
        fullname=data.fullname,
        lastname=data.lastname,
        username=data.username,
        password=hasher.hash(data.password),
        status=data.status,
        created_at=now,
        updated_at=now,
    )

    with store_errors("Insert failed"):
        try:
            db.add(user)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            if not is_duplicate_key(exc):
                raise
            raise Conflict("Username already exists!")
        db.refresh(user)

    logger.info("Created user id=%s username=%s", user.id, user.username)
    return user


def build_update_values(hasher: PasswordHasher, data: UserUpdate) -> dict:
    """Only the fields the client actually sent end up in the UPDATE.

    An explicit null still counts as sent. A non-empty password is
    re-hashed, and updated_at is always bumped.
    """
    sent = data.model_dump(exclude_unset=True)
    values = {field: sent[field] for field in EDITABLE_FIELDS if field in sent}

    if sent.get("password"):
        values["password"] = hasher.hash(sent["password"])

    values["updated_at"] = datetime.now()
    return values


def update_user(db: Session, hasher: PasswordHasher, user_id: int, data: UserUpdate) -> User:
    values = build_update_values(hasher, data)

    with store_errors("Update failed"):
        try:
            matched = db.query(User).filter(User.id == user_id).update(values, synchronize_session=False)
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            if not is_duplicate_key(exc):
                raise
            raise Conflict("Username already exists!")

        if matched == 0:
            raise UserNotFound("User not found")

        db.expire_all()
        user = db.query(User).filter(User.id == user_id).first()

    logger.info("Updated user id=%s fields=%s", user_id, sorted(values))
    return user


def delete_user(db: Session, user_id: int):
    with store_errors("Delete failed"):
        deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    if deleted == 0:
        raise UserNotFound("User not found")
    logger.info("Deleted user id=%s", user_id)
