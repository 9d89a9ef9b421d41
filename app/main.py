# /app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Application-specific Imports ---
from .core.config import Settings
from .core.errors import ErrorCode
from .core.logging_config import configure_logging
from .core.security import ApiKeyRejected
from .db.store import Store
from .models.result_model import ActionResult
from .routers import (
    access_router,
    admin_router,
    auth_router,
    chat_router,
    content_router,
    rewards_router,
    sessions_router,
    users_router,
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    # --- Application Lifecycle Management ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Runs ONCE on start-up: the store is built here and injected everywhere else.
        configure_logging(settings.log_level)
        store = Store(settings.database_url, timeout_seconds=settings.store_timeout_seconds).connect()
        store.create_all()
        app.state.store = store
        logger.info("Collab backend started (session writes: %s)", settings.session_write_mode)
        yield
        # Runs ONCE on shutdown.
        store.close()

    app = FastAPI(
        title="Classroom Collab API",
        description="Live sessions, chat, one-off sharing and rewards for the classroom.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Error Envelopes ---
    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {field} {first.get('msg', '')}".strip()
        body = ActionResult.failure(ErrorCode.VALIDATION_ERROR, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(mode="json", exclude_none=True))

    @app.exception_handler(ApiKeyRejected)
    async def api_key_rejected_handler(request: Request, exc: ApiKeyRejected):
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"success": False, "error": "Unauthorized"})

    # --- API Router Inclusion ---
    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(access_router.router, prefix="/api/access-code", tags=["Access Code"])
    app.include_router(sessions_router.router, prefix="/api/sessions", tags=["Sessions"])
    app.include_router(content_router.router, prefix="/api/content", tags=["Sharing"])
    app.include_router(chat_router.router, prefix="/api/chat", tags=["Chat"])
    app.include_router(rewards_router.router, prefix="/api/rewards", tags=["Rewards"])
    app.include_router(users_router.router, prefix="/api", tags=["Points & Leaderboard"])
    app.include_router(admin_router.router, prefix="/api", tags=["Admin"])

    # --- Root / Health Check Endpoints ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the API is online."""
        return {"status": "Collab backend is running!", "version": app.version}

    @app.get("/health", tags=["Health Check"])
    def store_health(request: Request):
        healthy = request.app.state.store.health_check()
        code = status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(status_code=code, content={"store": "ok" if healthy else "unavailable"})

    return app


app = create_app()
