from app.models.property import Property
from app.models.consultation import Consultation
from app.models.admin import Admin

__all__ = ["Property", "Consultation", "Admin"]
