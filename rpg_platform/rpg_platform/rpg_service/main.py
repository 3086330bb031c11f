"""
RPG Service - user authentication and character management
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import init_db
from .dependencies import get_token_issuer
from .routes import auth, characters

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Fail fast on a missing signing secret, then initialize the database"""
    get_token_issuer()
    init_db()
    logger.info("RPG service started")
    yield


app = FastAPI(
    title="RPG Service",
    description="User authentication and character management",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(characters.router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "RPG Service",
        "version": "1.0.0",
        "status": "running"
    }
