import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_client import make_asgi_app

from devconnector.api.routes import router as api_router
from devconnector.clients.github_client import github_client
from devconnector.core.config import settings
from devconnector.core.errors import setup_exception_handlers
from devconnector.db.database import init_db

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME}...")
    init_db()
    logger.info("Database tables ready")

    yield

    await github_client.close()
    logger.info(f"{settings.PROJECT_NAME} shut down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Developer social network API: profiles, posts, likes and comments",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log request timing and status"""
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Duration: {duration:.3f}s"
    )
    return response


setup_exception_handlers(app)

# Prometheus monitoring
app.mount("/metrics", make_asgi_app())

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.VERSION}
