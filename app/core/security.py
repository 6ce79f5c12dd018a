import hmac
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from app.core.config import get_secret_key, get_service_role_key, get_token_expire_minutes

ALGORITHM = "HS256"


class TokenSigningUnavailable(RuntimeError):
    """SECRET_KEY is not configured, so tokens can be neither issued nor trusted."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_token(data: dict, expires_minutes: int | None = None) -> str:
    key = get_secret_key()
    if not key:
        raise TokenSigningUnavailable("SECRET_KEY is not set")
    payload = dict(data)
    minutes = expires_minutes if expires_minutes is not None else get_token_expire_minutes()
    payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode(payload, key, algorithm=ALGORITHM)


def decode_token(token: str) -> dict | None:
    """Returns the payload, or None for a bad signature, an expired token or a missing SECRET_KEY."""
    key = get_secret_key()
    if not key:
        return None
    try:
        return jwt.decode(token, key, algorithms=[ALGORITHM])
    except JWTError:
        return None


def is_service_key(token: str) -> bool:
    key = get_service_role_key()
    if not key or not token:
        return False
    return hmac.compare_digest(token.encode("utf-8"), key.encode("utf-8"))
