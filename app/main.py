from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

import app.db.base  # noqa: F401
from app.api.main import api_router
from app.core.logging import configure_logging, get_logger
from app.core.settings import settings
from app.middlewares.telemetry import RequestContextMiddleware
from app.version import APP_VERSION, GIT_SHA

configure_logging(json=settings.LOG_JSON, level=settings.LOG_LEVEL)

app = FastAPI(debug=settings.DEBUG, title="Student Records", version=APP_VERSION)

# --- Middlewares de contexto/log
app.add_middleware(RequestContextMiddleware)

# --- CORS: sem ALLOWED_HOSTS, qualquer origem
allowed_origins = []
for host in settings.ALLOWED_HOSTS.split(","):
    _host = host.strip()
    if not _host:
        continue
    # aceita tanto com quanto sem protocolo
    if _host.startswith("http"):
        allowed_origins.append(_host)
    else:
        allowed_origins.append(f"http://{_host}")
        allowed_origins.append(f"https://{_host}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["*"],
    allow_credentials=bool(allowed_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


# --- Endpoints
@app.get("/", response_class=PlainTextResponse)
def root():
    return "This server is running smoothly"


@app.get("/healthz", tags=["ops"])
def healthz():
    get_logger().info("health.check")
    return {
        "status": "ok",
        "env": settings.APP_ENV,
        "version": APP_VERSION,
        "git_sha": GIT_SHA,
    }
