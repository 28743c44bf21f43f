# src/api/main.py
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes.images import router as images_router
from src.core.browser import reset_browser_pool

logger = logging.getLogger("kloth.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Shutdown: the shared browser lives for the whole process
    try:
        await reset_browser_pool()
    except Exception as e:
        logger.warning(f"Error closing shared browser: {e}")


app = FastAPI(
    title="Kloth Image Extractor",
    version="1.0.0",
    description="Product image extraction for e-commerce product pages",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %s %.0fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"success": False, "error": "Endpoint not found"})
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})


app.include_router(images_router, prefix="/api")


@app.get("/")
def index():
    return {
        "message": "Kloth.me Image Scraper API",
        "endpoints": {
            "extractImages": "GET /api/extract-images?url=<ecommerce-url>",
            "domains": "GET /api/domains",
        },
    }


@app.get("/health")
def health():
    return {"status": "ok"}
