import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.config import Settings
from storefront.db import get_db
from storefront.errors import Conflict, InvalidArgument, Unauthenticated
from storefront.models.user import User
from storefront.schemas.user import AuthOut, LoginSchema, SignupSchema, UserOut
from storefront.utils.security import (
    create_access_token,
    get_settings_from_app,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(settings: Settings, user: User, message: str) -> AuthOut:
    token = create_access_token(settings, user.id, user.email)
    return AuthOut(
        message=message,
        token=token,
        user=UserOut(id=user.id, email=user.email, name=user.name),
    )


@router.post("/signup", response_model=AuthOut)
def signup(
    payload: SignupSchema,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
):
    email = (payload.email or "").strip().lower()
    name = (payload.name or "").strip()
    if not email or not payload.password or not name:
        raise InvalidArgument("Email, password, and name are required")

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise Conflict("User already exists with this email")

    user = User(email=email, password_hash=hash_password(payload.password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Concurrent signup with the same email won the unique constraint
        db.rollback()
        raise Conflict("User already exists with this email")
    db.refresh(user)
    logger.info("New user signed up: id=%s", user.id)
    return _auth_response(settings, user, "User created successfully")


@router.post("/login", response_model=AuthOut)
def login(
    credentials: LoginSchema,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
):
    email = (credentials.email or "").strip().lower()
    if not email or not credentials.password:
        raise InvalidArgument("Email and password are required")
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(credentials.password, user.password_hash):
        raise Unauthenticated("Invalid email or password")
    return _auth_response(settings, user, "Login successful")
