"""Main FastAPI application for the CodeAI chat backend."""
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from codeai import __version__
from codeai.agents.subagents.cohere_ai_subagent import CohereAISubagent, get_cloud_backend
from codeai.db.init import init_db
from codeai.middleware.cors import add_cors_middleware
from codeai.schemas.conversation import HealthResponse

# Create FastAPI application
app = FastAPI(
    title="CodeAI Chat API",
    description="Chat-driven code generation with project memory and live previews",
    version=__version__,
)

# Add CORS middleware
add_cors_middleware(app)


@app.on_event("startup")
async def startup_event():
    """Initialize database on startup."""
    try:
        init_db()
        print("[SUCCESS] Database tables initialized successfully.")
    except Exception as e:
        print(f"[WARNING] Database initialization failed: {str(e)}")
        print("[WARNING] Server will continue but database operations may fail.")
        print("[WARNING] Please check your DATABASE_URL.")

    print("[SUCCESS] Application startup complete.")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Error bodies are {"error": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Validation failures are 400s; bad path ids get a short message."""
    errors = exc.errors()
    path_errors = [e for e in errors if e.get("loc") and e["loc"][0] == "path"]
    if path_errors:
        message = "Invalid file ID" if path_errors[0]["loc"][-1] == "file_id" else "Invalid conversation ID"
        return JSONResponse(status_code=400, content={"error": message})

    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(errors)},
    )


def health_payload(cloud_backend: CohereAISubagent) -> HealthResponse:
    return HealthResponse(
        status="ok",
        aiMode=cloud_backend.ai_mode,
        message="Cloud AI ready" if cloud_backend.enabled else "Local template engine active",
    )


@app.get("/health", response_model=HealthResponse)
async def health_check(cloud_backend: CohereAISubagent = Depends(get_cloud_backend)):
    """Health check endpoint."""
    return health_payload(cloud_backend)


@app.get("/api/health", response_model=HealthResponse, include_in_schema=False)
async def api_health_check(cloud_backend: CohereAISubagent = Depends(get_cloud_backend)):
    return health_payload(cloud_backend)


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the CodeAI Chat API",
        "title": "CodeAI Chat API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# Import and include routers
from codeai.routers import conversations, files  # noqa: E402

app.include_router(conversations.router)
app.include_router(files.router)
# Same handlers under /api for the web UI
app.include_router(conversations.router, prefix="/api")
app.include_router(files.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "codeai.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
