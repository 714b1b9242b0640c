"""
Lead Qualification API - Main Application.

FastAPI application with CORS enabled for the intake wizard frontend.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.settings import ALLOWED_ORIGINS, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL)

# Create FastAPI application
app = FastAPI(
    title="Lead Qualification API",
    description="REST API for qualifying and segmenting tourism intake leads",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "lead-qualification-api"
    }


@app.get("/", tags=["Root"])
def root():
    return {
        "message": "Lead Qualification API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import leads

app.include_router(leads.router, prefix="/api/v1", tags=["Leads"])
