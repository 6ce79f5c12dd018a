import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.consultation import Consultation
from app.schemas.consultation import ConsultationCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Consultations - Public"])


def _clean(value: str | None) -> str | None:
    return (value or "").strip() or None


@router.post("/consultations")
def request_consultation(data: ConsultationCreateRequest, db: Session = Depends(get_db)):
    name = _clean(data.name)
    email = _clean(data.email)
    phone = _clean(data.phone)
    if not name:
        raise HTTPException(status_code=400, detail="name is required")
    if not email and not phone:
        raise HTTPException(status_code=400, detail="email or phone is required")
    consultation = Consultation(
        name=name,
        email=email,
        phone=phone,
        message=_clean(data.message),
        property_id=_clean(data.propertyId),
        status="pending",
    )
    db.add(consultation)
    db.commit()
    db.refresh(consultation)
    logger.info("New consultation request %s from %s", consultation.id, name)
    return {"success": True, "id": consultation.id}
