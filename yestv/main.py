import time
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth import AuthService
from .catalog import CatalogService
from .clients import ClientDirectory
from .config import Settings, check_settings, settings
from .errors import (
    AppError,
    app_error_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from .middleware_request_id import RequestIDMiddleware
from .otp import OTPConfig, OTPStore
from .playback import PlaybackLog
from .routers import auth as auth_router
from .routers import catalog as catalog_router
from .routers import clients as clients_router
from .routers import playback as playback_router
from .sms_provider import SmsProvider, build_sms_provider
from .storage import JsonStore


REQ = Counter("yestv_http_requests_total", "HTTP requests", ["method", "path", "status"])
REQ_DURATION = Histogram(
    "yestv_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)


def create_app(
    cfg: Optional[Settings] = None,
    *,
    otp_store: Optional[OTPStore] = None,
    sms: Optional[SmsProvider] = None,
) -> FastAPI:
    cfg = cfg or settings
    check_settings(cfg)

    app = FastAPI(title="YES TV API", version="0.1.0")

    store = JsonStore(cfg.DATA_DIR)
    clients = ClientDirectory(store, cfg.CLIENT_NAME_TEMPLATE)
    app.state.settings = cfg
    app.state.store = store
    app.state.catalog = CatalogService(store)
    app.state.clients = clients
    app.state.playback = PlaybackLog(store, cfg.PLAYBACK_LOG_MAX)
    app.state.otp = otp_store if otp_store is not None else OTPStore(OTPConfig(ttl_secs=cfg.OTP_TTL_SECS))
    app.state.auth = AuthService(app.state.otp, clients, sms if sms is not None else build_sms_provider(cfg))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.middleware("http")
    async def _metrics_mw(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start
        route = getattr(request.scope.get("route"), "path", None) or "unmatched"
        REQ.labels(request.method, route, str(response.status_code)).inc()
        REQ_DURATION.labels(request.method, route).observe(duration)
        return response

    @app.get("/")
    def root():
        return {"status": "ok", "service": "YES TV API"}

    @app.get("/health")
    def health():
        return {"status": "ok", "env": cfg.ENV}

    @app.get("/metrics")
    def metrics():
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(catalog_router.router)
    app.include_router(playback_router.router)
    app.include_router(clients_router.router)
    app.include_router(auth_router.router)
    return app


app = create_app()
