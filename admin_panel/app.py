"""Promoter Panel - FastAPI app with modular routers"""
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from contextlib import asynccontextmanager
from pathlib import Path
import sys
import time
import logging

# Ensure project root is in path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

import config
from database import init_db, close_db

# Routers
from admin_panel.routers import auth, campaigns

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# === Lifespan ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    for problem in config.validate_config():
        logger.error(f"Config: {problem}")
    try:
        await init_db()
        logger.info("Database initialized")
    except Exception as e:
        logger.critical(f"Failed to initialize database: {e}")

    yield

    # Shutdown
    await close_db()


# === App Setup ===

app = FastAPI(title="Promoter Panel", lifespan=lifespan)


# === Middleware ===

def resolve_redirect(path: str, signed_in: bool):
    """Route guard: where to send the request instead, or None to let it through"""
    if path in config.PUBLIC_ROUTES and signed_in:
        return "/dashboard"
    if any(path.startswith(prefix) for prefix in config.PROTECTED_PREFIXES) and not signed_in:
        return "/login"
    if path == "/":
        return "/dashboard" if signed_in else "/login"
    return None


@app.middleware("http")
async def auth_middleware(request: Request, call_next):
    """Redirect by session state and log request timing"""
    start_time = time.time()
    path = request.url.path
    signed_in = auth.get_session_phone(request) is not None

    target = resolve_redirect(path, signed_in)
    if target:
        logger.info(f"↪️  {request.method} {path} -> {target} (signed in: {'YES' if signed_in else 'NO'})")
        return RedirectResponse(target, 307)

    logger.info(f"➡️  {request.method} {path}")

    try:
        response = await call_next(request)
    except Exception as e:
        duration = time.time() - start_time
        logger.error(f"❌ Request failed: {request.method} {path} - {duration:.2f}s - {e}")
        raise

    duration = time.time() - start_time
    if duration > config.SLOW_REQUEST_THRESHOLD:
        logger.warning(f"🐢 Slow request: {request.method} {path} {duration:.2f}s")

    return response


# === Setup Routers ===

app.include_router(auth.router)

campaigns.setup_routes(auth.get_promoter_id)
app.include_router(campaigns.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
