"""
FastAPI application setup and configuration.
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


# =============================================================================
# Constants
# =============================================================================

DEFAULT_CORS_ORIGINS = "*"
API_TITLE = "modeguard API"
API_VERSION = "0.1.0"


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(title=API_TITLE, version=API_VERSION)


# =============================================================================
# CORS Configuration
# =============================================================================

# Set CORS_ORIGINS to a comma-separated list of origins outside local use:
# CORS_ORIGINS="https://example.com,https://app.example.com"

cors_origins_env = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
cors_origins = (
    [origin.strip() for origin in cors_origins_env.split(",")]
    if cors_origins_env != DEFAULT_CORS_ORIGINS
    else [DEFAULT_CORS_ORIGINS]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
