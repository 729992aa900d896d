"""FastAPI front for the summarization gateway.

Endpoints:
- GET /health
- POST /api/summarize  { "text": "..." }
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from summary_gateway.common.config import API_KEY_ENV, get_api_key
from summary_gateway.common.logging_setup import setup_logging
from summary_gateway.common.schema import ErrorOut, SummarizeOut
from summary_gateway.common.templates import PLACEHOLDER
from summary_gateway.gateway import SummarizationGateway

LOGGER = logging.getLogger("summary_gateway.serve.app")
setup_logging()

gateway = SummarizationGateway()

app = FastAPI(title="Summary Gateway")

@app.on_event("startup")
def _check_configuration_on_startup() -> None:
    """Warn early about a missing credential or a template without a slot."""
    if get_api_key() is None:
        LOGGER.warning("%s is not set; /api/summarize will answer 500 until it is", API_KEY_ENV)
    if PLACEHOLDER not in gateway.template:
        LOGGER.warning("Prompt template has no %s placeholder", PLACEHOLDER)
    LOGGER.info("Model candidates: %s", ", ".join(gateway.candidates))

@app.get("/health")
def health() -> dict[str, object]:
    return {"status": "ok", "models": list(gateway.candidates)}


@app.post(
    "/api/summarize",
    response_model=SummarizeOut,
    responses={
        400: {"model": ErrorOut},
        401: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
)
async def summarize(request: Request) -> JSONResponse:
    raw = await request.body()
    status, body = await run_in_threadpool(gateway.summarize, raw)
    return JSONResponse(status_code=status, content=body)
