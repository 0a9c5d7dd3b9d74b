"""
FastAPI application for the pathwise learning engine.

Provides REST API for:
- Dashboard reports (insights, recommendations, predictions, achievements)
- Adaptive difficulty and learning path planning
- Career guidance and industry trends
- Motivation and learning-style detection
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from config import get_settings
from pathwise import __version__
from pathwise.api.routers import engine_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info("Starting pathwise engine service...")
    brain = engine_router.get_brain()
    logger.info(
        f"Service started on {settings.api_host}:{settings.api_port} "
        f"(reference data {brain.reference.version})"
    )

    yield

    # Shutdown
    logger.info("Shutting down pathwise engine service...")


app = FastAPI(
    title="Pathwise",
    description="""
    Learner modeling and recommendation engine.

    Clients send the learner profile (and optional session history) with each
    request; the service keeps no per-learner state.
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ========================================
# Health & Status Endpoints
# ========================================


@app.get("/", tags=["Health"])
def root() -> dict[str, str]:
    """Root endpoint returning service info."""
    return {
        "service": "pathwise",
        "version": __version__,
        "status": "ok",
    }


@app.get("/health", tags=["Health"])
def health_check() -> dict[str, Any]:
    """Health check with the loaded reference dataset."""
    brain = engine_router.get_brain()
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "reference_data": {
            "version": brain.reference.version,
            "career_paths": len(brain.reference.career_paths),
            "trending_skills": len(brain.reference.trending_skills),
        },
        "config": {
            "recommendation_limit": brain.recommendation_limit,
            "streak_celebration_days": brain.streak_celebration_days,
        },
    }


# ========================================
# Mount routers
# ========================================

app.include_router(engine_router.router, tags=["Engine"])
