"""
GPS Collector API

FastAPI application for GPS point-pair ingestion.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gps_collector import __version__
from gps_collector.config import settings
from gps_collector.db.session import init_db
from gps_collector.api.v1.router import api_router


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting GPS Collector API...")
    init_db()
    logger.info("Database initialized")
    if settings.trust_client_metrics:
        logger.warning("Client-supplied derived metrics are stored without recomputation")

    yield

    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="GPS Collector API",
    description="Ingestion of GPS point-pairs with server-side motion metrics",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("gps_collector.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
