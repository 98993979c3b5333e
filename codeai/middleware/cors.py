"""CORS configuration for the web UI + FastAPI integration."""
from fastapi.middleware.cors import CORSMiddleware

from codeai.config import ENVIRONMENT, FRONTEND_URL

# Vite dev server defaults
ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

# Add production frontend URL if provided
if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)


def add_cors_middleware(app):
    """Add CORS middleware to the FastAPI application."""
    print("[CORS] Configuration:")
    print(f"   Environment: {ENVIRONMENT}")
    if ENVIRONMENT == "production":
        # Only the configured frontend in production
        origins = [FRONTEND_URL] if FRONTEND_URL else []
    else:
        origins = ALLOWED_ORIGINS
    print(f"   Allowed Origins: {origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
