"""Property field coercion: loose request bag -> stored row values.

Create and update share one path. On update the stored row supplies the
fallback for every field the caller left out or sent in an unusable form.
"""
import re

from app.core.imagery import PropertyType

REQUIRED_FIELDS = ("title", "location", "description")

# column maxima: price is BIGINT, the rest INTEGER
BIGINT_MAX = 2**63 - 1
INT_MAX = 2**31 - 1

# field -> (floor, default on create, ceiling)
INT_FIELDS = {
    "price": (0, 0, BIGINT_MAX),
    "beds": (1, 1, INT_MAX),
    "baths": (1, 1, INT_MAX),
    "sqft": (500, 1000, INT_MAX),
    "garage": (0, 1, INT_MAX),
}

DEFAULT_STATUS = "For Sale"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TRUE_STRINGS = {"true", "1", "yes", "on", "y"}


class FieldRangeError(ValueError):
    """A numeric field is larger than its column can hold."""

    def __init__(self, field: str, ceiling: int):
        super().__init__(f"{field} must not exceed {ceiling}")
        self.field = field
        self.ceiling = ceiling


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def missing_required_fields(body: dict) -> list[str]:
    return [name for name in REQUIRED_FIELDS if _blank(body.get(name))]


def parse_int(value) -> int | None:
    """Lenient integer parse: leading digits win ("12abc" -> 12, "3.7" -> 3), anything else is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _pick_str(raw, previous, default: str = "") -> str:
    for candidate in (raw, previous):
        if not _blank(candidate):
            return str(candidate).strip()
    return default.strip()


def _pick_int(field: str, raw, previous) -> int:
    floor, default, ceiling = INT_FIELDS[field]
    value = parse_int(raw)
    if value is not None and value > ceiling:
        raise FieldRangeError(field, ceiling)
    if value is None or value < floor:
        value = previous if isinstance(previous, int) and not isinstance(previous, bool) else default
    return max(floor, value)


def _pick_type(raw, previous) -> str:
    parsed = PropertyType.parse(raw)
    if parsed is None:
        parsed = PropertyType.coerce(previous)
    return parsed.value


def normalize_property(body: dict, existing=None) -> dict:
    """Build the full column set for a property row.

    `existing` is the stored row on update, None on create. Image columns are
    not touched here. Raises FieldRangeError for a number too large to store.
    """
    def prior(name):
        return getattr(existing, name, None) if existing is not None else None

    location = _pick_str(body.get("location"), prior("location"))
    raw_address = body.get("fullAddress")
    if _blank(raw_address):
        raw_address = body.get("full_address")

    record = {
        "title": _pick_str(body.get("title"), prior("title")),
        "location": location,
        "full_address": _pick_str(raw_address, prior("full_address"), location),
        "type": _pick_type(body.get("type"), prior("type")),
        "status": _pick_str(body.get("status"), prior("status"), DEFAULT_STATUS),
        "description": _pick_str(body.get("description"), prior("description")),
    }
    for field in INT_FIELDS:
        record[field] = _pick_int(field, body.get(field), prior(field))

    if body.get("isRental") is not None:
        record["is_rental"] = parse_bool(body["isRental"])
    elif existing is not None and existing.is_rental is not None:
        record["is_rental"] = bool(existing.is_rental)
    else:
        record["is_rental"] = False
    return record
