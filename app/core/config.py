"""Central config. Values come from the environment (.env loaded once); each getter reads it on call."""
import logging
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./listings.db"
DEFAULT_IMAGE_SERVICE_URL = "https://readdy.ai/api/search-image"
DEMO_ADMIN_EMAIL = "admin@gmail.com"
DEMO_ADMIN_PASSWORD = "admin123"
DEMO_SECRET_KEY = "change-me"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_database_url() -> str:
    """Read once, when app.db.session builds the engine and its pool."""
    return (os.getenv("DATABASE_URL") or "").strip() or DEFAULT_DATABASE_URL


def is_demo_mode() -> bool:
    """DEMO_MODE=1 seeds the demo admin pair and shows it on the login page. Never set it in production."""
    return (os.getenv("DEMO_MODE") or "").strip().lower() in _TRUE_VALUES


def get_service_role_key() -> str:
    """Privileged key for server-to-server callers. Empty disables key access."""
    return (os.getenv("SERVICE_ROLE_KEY") or "").strip()


def get_secret_key() -> str | None:
    """Token signing key. None when unset outside demo mode: no tokens are issued or accepted then."""
    key = (os.getenv("SECRET_KEY") or "").strip()
    if key and key != DEMO_SECRET_KEY:
        return key
    return DEMO_SECRET_KEY if is_demo_mode() else None


def get_token_expire_minutes() -> int:
    try:
        return int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "720"))
    except ValueError:
        return 720


def get_admin_credentials() -> tuple[str, str] | None:
    """Pair used to seed the admins table.

    ADMIN_EMAIL/ADMIN_PASSWORD when both are set, the demo pair in demo mode,
    otherwise None (no account is seeded).
    """
    email = (os.getenv("ADMIN_EMAIL") or "").strip()
    password = os.getenv("ADMIN_PASSWORD") or ""
    if email and password:
        return email, password
    if is_demo_mode():
        return DEMO_ADMIN_EMAIL, DEMO_ADMIN_PASSWORD
    return None


def get_login_prefill() -> tuple[str, str] | None:
    """Credentials shown on the login page, only in demo mode."""
    return get_admin_credentials() if is_demo_mode() else None


def get_image_service_url() -> str:
    return (os.getenv("IMAGE_SERVICE_URL") or "").strip() or DEFAULT_IMAGE_SERVICE_URL


def configure_logging() -> None:
    level = (os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
