import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.consultation import Consultation
from app.api.cors import preflight_response
from app.api.deps import Caller, get_management_caller
from app.api.errors import store_error
from app.schemas.consultation import ConsultationIdRequest, ConsultationStatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin - Consultations"])

PATH = "/manage-consultations"


def consultation_to_dict(c: Consultation) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "email": c.email,
        "phone": c.phone,
        "message": c.message,
        "property_id": c.property_id,
        "status": c.status,
        "created_at": c.created_at.isoformat() if c.created_at else None,
    }


def _require_id(value) -> str:
    if value is None or not str(value).strip():
        raise HTTPException(status_code=400, detail="Consultation ID is required")
    return str(value).strip()


@router.options(PATH, include_in_schema=False)
def consultations_preflight():
    return preflight_response()


@router.get(PATH)
def list_consultations(db: Session = Depends(get_db), caller: Caller = Depends(get_management_caller)):
    try:
        rows = db.query(Consultation).order_by(Consultation.created_at.desc()).all()
    except SQLAlchemyError as e:
        logger.exception("Fetching consultations failed")
        raise HTTPException(status_code=500, detail=store_error("Failed to fetch consultations", e))
    logger.info("%s fetched %d consultations", caller.label, len(rows))
    return {"consultations": [consultation_to_dict(c) for c in rows]}


@router.put(PATH)
def update_consultation_status(
    data: ConsultationStatusUpdate | None = None,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_management_caller),
):
    cid = _require_id(data.id if data else None)
    if data.status is None or not str(data.status).strip():
        raise HTTPException(status_code=400, detail="Consultation status is required")
    row = None
    try:
        result = db.execute(
            update(Consultation)
            .where(Consultation.id == cid)
            .values(status=str(data.status).strip())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount:
            row = db.query(Consultation).filter(Consultation.id == cid).first()
            updated = consultation_to_dict(row)
            db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Updating consultation %s failed", cid)
        raise HTTPException(status_code=500, detail=store_error("Failed to update consultation", e))
    if row is None:
        db.rollback()
        raise HTTPException(status_code=404, detail="Consultation not found")

    logger.info("%s set consultation %s to %s", caller.label, cid, updated["status"])
    return {"success": True, "consultation": updated}


@router.delete(PATH)
def delete_consultation(
    data: ConsultationIdRequest | None = None,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_management_caller),
):
    cid = _require_id(data.id if data else None)
    try:
        db.query(Consultation).filter(Consultation.id == cid).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Deleting consultation %s failed", cid)
        raise HTTPException(status_code=500, detail=store_error("Failed to delete consultation", e))

    logger.info("%s deleted consultation %s", caller.label, cid)
    return {"success": True}
