from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import uuid

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext

from storefront.config import Settings
from storefront.errors import Unauthenticated

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
http_bearer = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # Unrecognized or corrupt hash in the store
        logger.warning("Stored password hash could not be verified")
        return False


# ===== JWT helpers =====
def create_access_token(
    settings: Settings, user_id: int, email: str, expires_delta: Optional[timedelta] = None
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
        "iat": now,
        "nbf": now,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_user_id(settings: Settings, token: str) -> int:
    """Return the user id carried by a valid token, or raise Unauthenticated."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise Unauthenticated("Invalid token")
    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid token")


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(
    token: HTTPAuthorizationCredentials = Depends(http_bearer),
    settings: Settings = Depends(get_settings_from_app),
) -> int:
    if not token or not token.credentials:
        raise Unauthenticated("Authentication required")
    return decode_user_id(settings, token.credentials)
