"""
FastAPI application for the Fintelligence relay.

Provides endpoints for:
- Parsing bank statement PDFs into balances and transactions
- Parsing statement PDFs or pasted text into categorized transactions
- Simulating a brokerage connection
- Generating financial advice
"""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response

from . import __version__
from .config import get_settings
from .errors import INVALID_REQUEST, RelayError
from .models import HealthResponse
from .routers import analysis, brokerage, statements
from .services.ai import AIService
from .services.pdf_service import PDFService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

FALLBACK_INDEX_HTML = """<!doctype html>
<html><head><title>Fintelligence</title></head>
<body><h1>Fintelligence</h1><p>The web client is not installed.</p></body></html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting Fintelligence relay...")
    settings = get_settings()
    # Built once and shared by every request
    app.state.ai_service = AIService.from_settings(settings)
    app.state.pdf_service = PDFService()
    logger.info("Services initialized (model=%s)", settings.openai_model)
    yield
    logger.info("Shutting down Fintelligence relay...")


# Create FastAPI application
app = FastAPI(
    title="Fintelligence API",
    description="Relays financial documents to an AI model for parsing and advice",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Page and Health Endpoints
# =============================================================================


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> Response:
    """Serve the single-page web client."""
    index_file = get_settings().static_dir / "index.html"
    if index_file.is_file():
        return FileResponse(index_file, media_type="text/html")
    return HTMLResponse(FALLBACK_INDEX_HTML)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy", message="Service is healthy", version=__version__
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(statements.router)
app.include_router(brokerage.router)
app.include_router(analysis.router)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    """Render relay errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    """Report malformed requests as 400 without echoing the input."""
    logger.info("Rejected %s: %d validation error(s)", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": INVALID_REQUEST},
    )


def run() -> None:
    """Run the relay with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    logger.info("Fintelligence server running on port %d", settings.port)
    uvicorn.run(
        "app.fintelligence.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
