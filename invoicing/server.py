"""FastAPI server for the invoicing back-end."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from invoicing import config
from invoicing.api import router as api_router
from invoicing.errors import InvoicingError, StoreError
from invoicing.logging_config import setup_logging
from invoicing.models.dto import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for app startup/shutdown."""
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    logger.info("Invoicing API starting, data directory: %s", config.get_data_dir())

    yield

    logger.info("Invoicing API stopped")


app = FastAPI(
    title="Invoicing API",
    description="CRUD API for products, categories, customers and invoices",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)


@app.exception_handler(InvoicingError)
async def invoicing_error_handler(request: Request, exc: InvoicingError):
    """Map typed errors to their status code with a ``detail`` body."""
    if isinstance(exc, StoreError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Invalid input is a 400, not FastAPI's default 422."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Include routers
app.include_router(api_router, prefix="/api")


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
