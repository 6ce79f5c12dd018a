import logging
from dataclasses import dataclass

from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.security import decode_token, is_service_key
from app.models.admin import Admin

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass
class Caller:
    """Who is calling a management endpoint: a signed-in admin or the service key holder."""
    kind: str  # admin | service
    admin: Admin | None = None

    @property
    def label(self) -> str:
        return f"admin:{self.admin.email}" if self.admin else "service"


def _admin_from_credentials(credentials: HTTPAuthorizationCredentials | None, db: Session) -> Admin:
    if not credentials:
        raise HTTPException(status_code=401, detail="Missing or invalid token")
    payload = decode_token(credentials.credentials)
    if not payload or payload.get("type") != "admin":
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    admin_id = payload.get("sub")
    if not admin_id:
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        admin_pk = int(admin_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")
    admin = db.query(Admin).filter(Admin.id == admin_pk).first()
    if not admin:
        raise HTTPException(status_code=401, detail="Admin not found")
    return admin


def get_admin_from_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Admin:
    return _admin_from_credentials(credentials, db)


def get_management_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Caller:
    """Admin token or service key. The key is re-read from the environment on every call."""
    if credentials and is_service_key(credentials.credentials):
        return Caller(kind="service")
    try:
        return Caller(kind="admin", admin=_admin_from_credentials(credentials, db))
    except HTTPException:
        logger.warning("Rejected management call without valid credentials")
        raise
