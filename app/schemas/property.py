from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class PropertyPayload(BaseModel):
    """Admin form body. Values stay loosely typed; app.core.validation coerces them."""
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    title: Any = None
    location: Any = None
    fullAddress: Any = None
    full_address: Any = None  # older admin builds send the column name
    price: Any = None
    type: Any = None
    status: Any = None
    beds: Any = None
    baths: Any = None
    sqft: Any = None
    garage: Any = None
    description: Any = None
    isRental: Any = None


class PropertyIdRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None


class PropertyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    location: str
    full_address: Optional[str] = None
    price: int
    type: str
    status: Optional[str] = None
    beds: int
    baths: int
    sqft: int
    garage: int
    description: str
    is_rental: bool
    image_url: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None
