"""
Account Status Tracker API — main entry point.

Team members rate each client weekly on six metrics; the dashboard shows the
weekly averages color coded per client. Data lives in a single JSON file.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from account_tracker.core.config import settings
from account_tracker.core.logging_config import configure_logging
from account_tracker.core.storage import JsonFileStorage, get_storage
from account_tracker.api import clients as clients_api
from account_tracker.api import survey as survey_api
from account_tracker.api import dashboard as dashboard_api
from account_tracker.api import admin as admin_api

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("=" * 50)
    logger.info(settings.APP_NAME)
    logger.info("=" * 50)
    logger.info(f"Data file: {Path(settings.DATA_FILE).resolve()}")
    logger.info(f"Server running at: http://localhost:{settings.PORT}")
    logger.info("=" * 50)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=CORS_METHODS,
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def preflight(request: Request, call_next):
    """Answer every OPTIONS request with an empty 204, whatever the path."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    return await call_next(request)


app.include_router(clients_api.router)
app.include_router(survey_api.router)
app.include_router(dashboard_api.router)
app.include_router(admin_api.router)


@app.get("/api/health", tags=["health"])
def health_check(storage: JsonFileStorage = Depends(get_storage)):
    dataset = storage.load()
    return {"status": "ok", "clients": len(dataset.clients), "responses": len(dataset.responses)}


# ── Frontend ─────────────────────────────────────────────────────────

@app.get("/", include_in_schema=False)
@app.get("/index.html", include_in_schema=False)
def index_page():
    html_path = Path(settings.INDEX_HTML)
    if not html_path.is_file():
        return PlainTextResponse("index.html not found", status_code=404)
    return HTMLResponse(html_path.read_text(encoding="utf-8"))


# Registered last: anything no route above matched, including a known path
# with an unsupported method, is a JSON 404.
@app.api_route(
    "/{unmatched:path}",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD"],
    include_in_schema=False,
)
def not_found(unmatched: str):
    return JSONResponse(status_code=404, content={"error": "Not found"})


# ── Error handlers ───────────────────────────────────────────────────

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Methods the catch-all does not list (TRACE, CONNECT) surface as 405 here
    if exc.status_code == 405:
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid {where or 'request'}: {first.get('msg')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    # Runs outside CORSMiddleware, so the headers are added by hand
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=CORS_HEADERS,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "account_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
