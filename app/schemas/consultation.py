from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ConsultationStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    status: Any = None


class ConsultationIdRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None


class ConsultationCreateRequest(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    propertyId: Optional[str] = None
