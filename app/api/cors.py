from fastapi.responses import PlainTextResponse

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


def preflight_response() -> PlainTextResponse:
    """Plain OPTIONS answer; real browser preflights are handled by CORSMiddleware first."""
    return PlainTextResponse("ok", headers=CORS_HEADERS)
