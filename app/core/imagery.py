"""
Listing imagery: property categories and the external image-search URLs built from them.
- Category phrase + lower-cased title = search query
- seq token (epoch ms) makes every generated URL distinct
- Regenerate only when title or category changes, otherwise the picture would shift on unrelated edits
"""
import enum
import time
from urllib.parse import quote

from app.core.config import get_image_service_url

IMAGE_WIDTH = 600
IMAGE_HEIGHT = 400

# encodeURIComponent leaves these unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


class PropertyType(str, enum.Enum):
    house = "House"
    condo = "Condo"
    penthouse = "Penthouse"
    townhouse = "Townhouse"
    estate = "Estate"
    duplex = "Duplex"
    loft = "Loft"

    @classmethod
    def parse(cls, value) -> "PropertyType | None":
        """Case-insensitive lookup; None when the value names no known category."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return None

    @classmethod
    def coerce(cls, value) -> "PropertyType":
        return cls.parse(value) or cls.house


CATEGORY_PHRASES = {
    PropertyType.house: (
        "beautiful modern family house exterior with large windows, manicured lawn, contemporary architecture, "
        "residential neighborhood setting, natural lighting, clean architectural lines, inviting entrance"
    ),
    PropertyType.condo: (
        "modern luxury condominium building exterior, sleek glass facade, urban setting, contemporary high-rise "
        "architecture, clean lines, sophisticated design, city backdrop"
    ),
    PropertyType.penthouse: (
        "luxury penthouse exterior view, upscale high-rise building, sophisticated architecture, panoramic city "
        "views, modern glass design, premium residential building"
    ),
    PropertyType.townhouse: (
        "elegant townhouse exterior, charming residential architecture, well-maintained facade, urban residential "
        "setting, classic design elements, inviting entrance"
    ),
    PropertyType.estate: (
        "magnificent luxury estate exterior, grand architecture, expansive grounds, impressive facade, upscale "
        "residential property, majestic design, pristine landscaping"
    ),
    PropertyType.duplex: (
        "attractive duplex home exterior, modern residential architecture, symmetrical design, well-maintained "
        "property, family-friendly neighborhood, clean contemporary lines"
    ),
    PropertyType.loft: (
        "modern loft building exterior, industrial architecture, converted warehouse style, urban setting, large "
        "windows, contemporary residential conversion"
    ),
}


def build_image_prompt(title: str, category) -> str:
    phrase = CATEGORY_PHRASES[PropertyType.coerce(category)]
    return f"{phrase}, {str(title or '').lower()}"


def build_image_url(title: str, category, now: float | None = None) -> str:
    prompt = build_image_prompt(title, category)
    seq = int((time.time() if now is None else now) * 1000)
    return (
        f"{get_image_service_url()}?query={quote(prompt, safe=_URI_COMPONENT_SAFE)}"
        f"&width={IMAGE_WIDTH}&height={IMAGE_HEIGHT}&seq=prop{seq}&orientation=landscape"
    )


def image_needs_refresh(existing, updated: dict) -> bool:
    """True when the normalized title or type differs from the stored row."""
    return updated.get("title") != existing.title or updated.get("type") != existing.type
