from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
import logging
import sys
import uuid

from config.settings import LOG_DIR, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from constants import ServiceInfo
from init_db import init_database
from api import users, health
from utils.error_handlers import register_exception_handlers
from utils.logging_utils import set_logging_context, clear_logging_context

REQUEST_ID_HEADER = "X-Request-ID"

# Create formatters and handlers
log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)
console_handler.setLevel(LOG_LEVEL)

# Configure root logger
root_logger = logging.getLogger()
root_logger.setLevel(LOG_LEVEL)
root_logger.addHandler(console_handler)

if LOG_DIR is not None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    LOG_FILE = LOG_DIR / "users.log"

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(LOG_LEVEL)
    root_logger.addHandler(file_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized (level={logging.getLevelName(LOG_LEVEL)}, dir={LOG_DIR})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Initializing database...")
    init_database()
    logger.info(f"✅ {ServiceInfo.NAME} ready")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=ServiceInfo.NAME,
    description=ServiceInfo.DESCRIPTION,
    version=ServiceInfo.VERSION,
    lifespan=lifespan
)

register_exception_handlers(app)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with its request id."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


# Include API routers
app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(health.router, tags=["health"])


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Starting {ServiceInfo.NAME} on http://{SERVER_HOST}:{SERVER_PORT}...")
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
