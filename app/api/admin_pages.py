"""Browser pages for the back office. Auth itself happens against /api/auth; pages only hold the token."""
import html
import json
from pathlib import Path
from string import Template

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.core.config import get_login_prefill

router = APIRouter(tags=["Admin - Pages"])

_web_dir = Path(__file__).resolve().parent.parent / "web"

TOKEN_STORAGE_KEY = "admin_token"
LOGIN_PAGE = "/admin/login"
DASHBOARD_PAGE = "/admin"
LOGIN_API = "/api/auth/admin/login"
ME_API = "/api/auth/me"


DEMO_PANEL = """    <div class="demo">
      <h2>Demo Credentials</h2>
      <p><strong>Email:</strong> {email}</p>
      <p><strong>Password:</strong> {password}</p>
    </div>
"""


def _js(value: str) -> str:
    # JSON string literal, safe inside a <script> block
    return json.dumps(value).replace("</", "<\\/")


def _render(name: str, html_values: dict, js_values: dict, raw_values: dict | None = None) -> str:
    template = Template((_web_dir / name).read_text(encoding="utf-8"))
    values = {k: html.escape(v, quote=True) for k, v in html_values.items()}
    values.update({k: _js(v) for k, v in js_values.items()})
    values.update(raw_values or {})
    return template.substitute(values)


def login_failure_message() -> str:
    prefill = get_login_prefill()
    if prefill is None:
        return "Invalid credentials."
    return f"Invalid credentials. Please use {prefill[0]} and {prefill[1]}"


@router.get(LOGIN_PAGE, response_class=HTMLResponse, include_in_schema=False)
def admin_login_page():
    prefill = get_login_prefill()
    email, password = prefill or ("", "")
    demo_panel = ""
    if prefill:
        demo_panel = DEMO_PANEL.format(email=html.escape(email), password=html.escape(password))
    page = _render(
        "admin_login.html",
        {"prefill_email": email, "prefill_password": password},
        {
            "token_key": TOKEN_STORAGE_KEY,
            "login_url": LOGIN_API,
            "me_url": ME_API,
            "next_url": DASHBOARD_PAGE,
            "failure_message": login_failure_message(),
        },
        {"demo_panel": demo_panel},
    )
    return HTMLResponse(page, headers={"Cache-Control": "no-store"})


@router.get(DASHBOARD_PAGE, response_class=HTMLResponse, include_in_schema=False)
def admin_dashboard_page():
    page = _render(
        "admin.html",
        {},
        {"token_key": TOKEN_STORAGE_KEY, "login_page": LOGIN_PAGE, "me_url": ME_API},
    )
    return HTMLResponse(page, headers={"Cache-Control": "no-store"})
