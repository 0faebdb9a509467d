"""HTTP server - FastAPI application exposing the prediction API."""

from contextlib import asynccontextmanager
from json import JSONDecodeError

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool

from app.container import container
from settings import CORS_HEADERS
from web.api import catalog, prediction
from web.api.errors import classify_error


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Initialize dependencies on startup."""
    container.init()
    logger.info("Container initialized")
    yield


app = FastAPI(
    title="MHT-CET College Predictor",
    description="Eligible college-branch slots from historical closing percentiles",
    version="1.0.0",
    lifespan=lifespan,
)


def _error(exc: Exception) -> JSONResponse:
    status, message = classify_error(exc)
    return JSONResponse(status_code=status, content={"error": message}, headers=CORS_HEADERS)


@app.options("/predict-colleges")
async def predict_preflight() -> Response:
    """CORS preflight: headers only."""
    return Response(headers=CORS_HEADERS)


@app.post("/predict-colleges")
async def predict_colleges(request: Request) -> JSONResponse:
    """Rank eligible college-branch slots for the posted criteria."""
    try:
        payload = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        payload = None

    try:
        result = await run_in_threadpool(prediction.predict_colleges, payload)
    except Exception as e:
        return _error(e)

    return JSONResponse(content=result.model_dump(), headers=CORS_HEADERS)


@app.get("/branches")
async def branches() -> JSONResponse:
    """List branches students can pick from."""
    try:
        result = await run_in_threadpool(catalog.get_branches)
    except Exception as e:
        return _error(e)

    return JSONResponse(content=result.model_dump(), headers=CORS_HEADERS)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "healthy"}, headers=CORS_HEADERS)
