"""Financial Record Processing API.

Independent handlers for transaction payloads: schema validation,
pseudonymization of personal fields, encryption, risk scoring and
flat-file storage. Each endpoint performs one isolated transformation;
none of them calls another.

Run with:
    python3 -m uvicorn finrecord.main:app --host 0.0.0.0 --port 8000
"""

import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from finrecord.config import load_config
from finrecord.errors import RecordProcessingError
from finrecord.log import setup_logging
from finrecord.routes import anonymization, encryption, risk, storage, validation
from finrecord.storage.filestore import FileStore

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Financial Record Processing API",
    description=(
        "Stateless handlers for financial transaction records: validation, "
        "pseudonymization, encryption, risk scoring, storage and retrieval."
    ),
    version="1.0.0",
)


@app.on_event("startup")
async def startup() -> None:
    """Load configuration once and build the shared file store."""
    config = load_config()
    setup_logging(config.log_level, config.log_file)

    store = FileStore(config.data_dir, default_filename=config.store_filename)

    # Attach to app state for dependency injection in routes
    app.state.config = config
    app.state.store = store
    logger.info(f"Started with data directory {config.data_dir}")


@app.exception_handler(RecordProcessingError)
async def handle_processing_error(
    request: Request, exc: RecordProcessingError
) -> JSONResponse:
    """Map handler failures to their status code and a JSON error body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected: {type(exc).__name__}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


# Mount all API routers
app.include_router(validation.router)
app.include_router(anonymization.router)
app.include_router(encryption.router)
app.include_router(risk.router)
app.include_router(storage.router)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}
