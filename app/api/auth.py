import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.admin import Admin
from app.api.deps import get_admin_from_token
from app.core.config import get_admin_credentials
from app.core.security import TokenSigningUnavailable, verify_password, create_token, hash_password
from app.schemas.auth import AdminLoginRequest, AdminLoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _admin_user(admin: Admin) -> dict:
    return {
        "id": f"admin_{admin.id}",
        "email": admin.email,
        "name": admin.name or "Admin",
    }


def ensure_default_admin(db: Session) -> Admin | None:
    """Seed the configured admin when the admins table is empty. Returns the new row, if any.

    Nothing is seeded unless ADMIN_EMAIL/ADMIN_PASSWORD are set or DEMO_MODE is on.
    """
    credentials = get_admin_credentials()
    if credentials is None or db.query(Admin).first():
        return None
    email, password = credentials
    admin = Admin(email=email.lower(), password_hash=hash_password(password), name="Admin")
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Created default admin %s", admin.email)
    return admin


@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(data: AdminLoginRequest, db: Session = Depends(get_db)):
    email = data.email.strip().lower()
    admin = db.query(Admin).filter(Admin.email == email).first()
    if not admin or not verify_password(data.password, admin.password_hash):
        logger.warning("Failed admin login for %s", email)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    try:
        token = create_token({"sub": str(admin.id), "type": "admin"})
    except TokenSigningUnavailable:
        logger.error("Admin login refused: SECRET_KEY is not configured")
        raise HTTPException(status_code=503, detail="Admin login is not configured")
    admin.last_login_at = datetime.now(timezone.utc)
    db.commit()
    logger.info("Admin %s signed in", admin.email)
    return {"token": token, "user": _admin_user(admin)}


@router.get("/me")
def me(admin: Admin = Depends(get_admin_from_token)):
    return {"user": _admin_user(admin)}
