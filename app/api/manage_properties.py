import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.property import Property
from app.api.cors import preflight_response
from app.api.deps import Caller, get_management_caller
from app.api.errors import error_body, store_error
from app.core.imagery import build_image_url, image_needs_refresh
from app.core.validation import FieldRangeError, missing_required_fields, normalize_property
from app.schemas.property import PropertyIdRequest, PropertyOut, PropertyPayload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin - Properties"])

PATH = "/manage-properties"


def property_to_dict(prop: Property) -> dict:
    return PropertyOut.model_validate(prop).model_dump()


def _require_id(value, action: str) -> str:
    if value is None or not str(value).strip():
        logger.warning("Missing property ID for %s", action)
        raise HTTPException(status_code=400, detail=f"Property ID is required for {action}")
    return str(value).strip()


def _not_found(db: Session, prop_id: str, action: str):
    db.rollback()
    logger.warning("Property not found for %s, id=%s", action, prop_id)
    return HTTPException(status_code=404, detail="Property not found")


def _normalize(body: dict, existing=None) -> dict:
    try:
        return normalize_property(body, existing)
    except FieldRangeError as e:
        logger.warning("Rejected out-of-range %s", e.field)
        raise HTTPException(status_code=400, detail=error_body(str(e)))


def _locked_row(db: Session, prop_id: str) -> Property | None:
    # held until commit/rollback so a concurrent update/delete of the same row waits
    return db.query(Property).filter(Property.id == prop_id).with_for_update().first()


@router.options(PATH, include_in_schema=False)
def properties_preflight():
    return preflight_response()


@router.get(PATH)
def list_properties(db: Session = Depends(get_db), caller: Caller = Depends(get_management_caller)):
    try:
        rows = db.query(Property).order_by(Property.created_at.desc()).all()
    except SQLAlchemyError as e:
        logger.exception("GET properties failed")
        raise HTTPException(status_code=500, detail=store_error("Failed to fetch properties", e))
    logger.info("%s fetched %d properties", caller.label, len(rows))
    return {"success": True, "properties": [property_to_dict(p) for p in rows]}


@router.post(PATH)
def create_property(
    data: PropertyPayload | None = None,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_management_caller),
):
    body = data.model_dump(exclude_unset=True) if data else {}
    missing = missing_required_fields(body)
    if missing:
        logger.warning("Create rejected, missing fields: %s", missing)
        raise HTTPException(
            status_code=400,
            detail=error_body(f"Missing required fields: {', '.join(missing)}"),
        )

    record = _normalize(body)
    image_url = build_image_url(record["title"], record["type"])
    prop = Property(**record, image_url=image_url, image=image_url)
    try:
        db.add(prop)
        db.commit()
        db.refresh(prop)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Insert property failed")
        raise HTTPException(status_code=500, detail=store_error("Failed to add property to database", e))

    logger.info("%s added property %s (%s)", caller.label, prop.id, prop.title)
    return {"success": True, "message": "Property added successfully", "property": property_to_dict(prop)}


@router.put(PATH)
def update_property(
    data: PropertyPayload | None = None,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_management_caller),
):
    prop_id = _require_id(data.id if data else None, "update")
    try:
        existing = _locked_row(db, prop_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Lookup for update failed, id=%s", prop_id)
        raise HTTPException(status_code=500, detail=store_error("Failed to update property in database", e))
    if not existing:
        raise _not_found(db, prop_id, "update")

    changes = _normalize(data.model_dump(exclude_unset=True), existing)
    if image_needs_refresh(existing, changes):
        logger.info("Generating new image for property %s", prop_id)
        image_url = build_image_url(changes["title"], changes["type"])
        changes["image_url"] = image_url
        changes["image"] = image_url

    try:
        # the row may have been deleted since the lookup (no row locks on SQLite)
        result = db.execute(
            update(Property)
            .where(Property.id == prop_id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise _not_found(db, prop_id, "update")
        db.refresh(existing)
        updated = property_to_dict(existing)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Update property failed, id=%s", prop_id)
        raise HTTPException(status_code=500, detail=store_error("Failed to update property in database", e))

    logger.info("%s updated property %s (%s)", caller.label, prop_id, updated["title"])
    return {"success": True, "message": "Property updated successfully", "property": updated}


@router.delete(PATH)
def delete_property(
    data: PropertyIdRequest | None = None,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_management_caller),
):
    prop_id = _require_id(data.id if data else None, "deletion")
    try:
        existing = _locked_row(db, prop_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Lookup for deletion failed, id=%s", prop_id)
        existing = None
    if not existing:
        raise _not_found(db, prop_id, "deletion")

    deleted = property_to_dict(existing)
    try:
        result = db.execute(
            delete(Property).where(Property.id == prop_id).execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise _not_found(db, prop_id, "deletion")
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Delete property failed, id=%s", prop_id)
        raise HTTPException(status_code=500, detail=store_error("Failed to delete property from database", e))

    logger.info("%s deleted property %s (%s)", caller.label, prop_id, deleted["title"])
    return {"success": True, "message": "Property deleted successfully", "deletedProperty": deleted}
