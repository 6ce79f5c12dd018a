from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.property import Property
from app.api.manage_properties import property_to_dict
from app.core.imagery import PropertyType

router = APIRouter(prefix="/api", tags=["Properties - Public"])


@router.get("/properties")
def list_listings(
    db: Session = Depends(get_db),
    type: str | None = Query(None),
    is_rental: bool | None = Query(None, alias="isRental"),
    location: str | None = Query(None),
):
    q = db.query(Property)
    if type:
        category = PropertyType.parse(type)
        if category is None:
            raise HTTPException(status_code=400, detail=f"Unknown property type: {type}")
        q = q.filter(Property.type == category.value)
    if is_rental is not None:
        q = q.filter(Property.is_rental == is_rental)
    if location:
        s = f"%{location.strip()}%"
        q = q.filter(Property.location.ilike(s) | Property.full_address.ilike(s))
    rows = q.order_by(Property.created_at.desc()).all()
    return {"properties": [property_to_dict(p) for p in rows]}


@router.get("/properties/{property_id}")
def get_listing(property_id: str, db: Session = Depends(get_db)):
    prop = db.query(Property).filter(Property.id == property_id).first()
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return {"property": property_to_dict(prop)}
