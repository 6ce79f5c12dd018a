import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import configure_logging, get_secret_key, is_demo_mode
from app.db.session import SessionLocal, engine, Base
from app.models import Admin, Consultation, Property  # noqa: F401
from app.api.errors import register_error_handlers
from app.api.auth import router as auth_router, ensure_default_admin
from app.api.admin_pages import router as admin_pages_router
from app.api.manage_properties import router as manage_properties_router
from app.api.manage_consultations import router as manage_consultations_router
from app.api.properties_public import router as properties_public_router
from app.api.consultations_public import router as consultations_public_router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Listings Admin API")


@app.middleware("http")
async def add_noindex_header(request: Request, call_next):
    """Keep the back office out of search engines."""
    response = await call_next(request)
    if request.url.path.startswith(("/admin", "/manage-")):
        response.headers["X-Robots-Tag"] = "noindex, nofollow"
    return response


@app.get("/robots.txt", include_in_schema=False)
async def robots_txt():
    return Response(
        content="User-agent: *\nDisallow: /admin\nDisallow: /manage-properties\nDisallow: /manage-consultations\n",
        media_type="text/plain",
    )


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    if get_secret_key() is None:
        logger.warning("SECRET_KEY is not set: admin login is disabled, only SERVICE_ROLE_KEY callers are accepted")
    if is_demo_mode():
        logger.warning("DEMO_MODE is on: demo admin credentials are seeded and shown on the login page")
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()
    logger.info("Listings Admin API ready")


app.include_router(auth_router)
app.include_router(admin_pages_router)
app.include_router(manage_properties_router)
app.include_router(manage_consultations_router)
app.include_router(properties_public_router)
app.include_router(consultations_public_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
