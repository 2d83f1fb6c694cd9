from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import StoreUnavailableError
from .infra.resource_ai_db import PostgresArtifactStore
from .routes import resource_ai
from .schemas import ErrorEnvelope

# Load environment variables (expects LLM_API_KEY, PG creds in .env)
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env")

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.artifact_store_backend == "postgres":
        try:
            PostgresArtifactStore().ensure_schema()
            logger.info("resource_ai_metadata schema ready")
        except StoreUnavailableError as e:
            # Requests will report the store as unavailable until Postgres is reachable
            logger.warning("Could not ensure artifact store schema: %s", e)
    yield


app = FastAPI(title="Resource AI Backend", version="0.1.0", lifespan=lifespan)
app.include_router(resource_ai.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same error envelope as every other failure."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=ErrorEnvelope(error="Invalid request body.").model_dump())


@app.get("/health")
def health() -> Dict[str, str]:
    """
    Health check endpoint to verify service status.

    Returns:
        Dict[str, str]: {"status": "ok"} if running.
    """
    return {"status": "ok"}


@app.get("/config")
def config_preview() -> Dict[str, str]:
    """
    Endpoint to preview current configuration (safely).

    Returns:
        Dict[str, str]: Provider key presence, model, base URL and store backend.
    """
    settings = get_settings()
    return {
        "llm_key_present": "true" if settings.llm_api_key else "false",
        "llm_base_url": settings.llm_base_url,
        "llm_model": settings.llm_model,
        "artifact_store_backend": settings.artifact_store_backend,
    }


if __name__ == "__main__":
    uvicorn.run(app, port=8000, host="0.0.0.0")
