from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .cors import ALLOWED_METHODS, CORS_HEADERS
from .errors import UploadError
from .logging_config import configure_logging
from .models import CardDetails, ErrorResponse, HealthResponse, MessageResponse, UploadResponse
from .orchestrator import ingest_upload
from .services.cards import render_card


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Event Cards", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=ALLOWED_METHODS,
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next) -> Response:
    # CORSMiddleware only answers requests that carry an Origin header
    response = await call_next(request)
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content=MessageResponse(message="Method Not Allowed").model_dump())
    return await http_exception_handler(request, exc)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


@app.get("/", response_class=HTMLResponse)
def card(request: Request) -> HTMLResponse:
    details = CardDetails.from_query(request.query_params)
    return HTMLResponse(render_card(details))


@app.options("/")
def preflight() -> Response:
    return Response(status_code=200)


@app.post("/")
async def upload(request: Request) -> JSONResponse:
    # Forward the raw body so multipart and plain uploads share one parser
    body = await request.body()
    try:
        grouped = ingest_upload(body, False, request.headers.get("content-type"))
    except UploadError as e:
        logger.info("Rejected upload: %s", e.message)
        return JSONResponse(status_code=e.status_code, content=MessageResponse(message=e.message).model_dump())
    except Exception as e:
        logger.exception("Error parsing upload")
        return JSONResponse(status_code=500, content=ErrorResponse(details=str(e)).model_dump())
    return JSONResponse(content=UploadResponse(groupedCards=grouped).model_dump())
