"""Create tables, seed the configured admin and a few sample listings."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.db.session import SessionLocal, engine, Base
from app.models import Admin, Consultation, Property  # noqa: F401
from app.api.auth import ensure_default_admin
from app.core.imagery import build_image_url
from app.core.validation import normalize_property

SAMPLE_LISTINGS = [
    {"title": "Sunny Villa", "location": "Lakeview", "description": "Bright family home near the water.",
     "price": 450000, "beds": 4, "baths": 3, "sqft": 2400, "garage": 2},
    {"title": "Skyline Penthouse", "location": "Downtown", "type": "Penthouse",
     "description": "Top-floor unit with city views.", "price": 1250000, "beds": 3, "baths": 2, "sqft": 1800},
    {"title": "Harbor Loft", "location": "Old Port", "type": "Loft", "status": "For Rent", "isRental": True,
     "description": "Converted warehouse loft.", "price": 3200, "beds": 1, "baths": 1, "sqft": 950, "garage": 0},
]

Base.metadata.create_all(bind=engine)
db = SessionLocal()

admin = ensure_default_admin(db)
if admin:
    print(f"Created admin: {admin.email}")

if not db.query(Property).first():
    for body in SAMPLE_LISTINGS:
        record = normalize_property(body)
        image_url = build_image_url(record["title"], record["type"])
        db.add(Property(**record, image_url=image_url, image=image_url))
    db.commit()
    print(f"Created {len(SAMPLE_LISTINGS)} sample properties")

db.close()
print("Init complete.")
