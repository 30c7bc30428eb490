from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from backend.cors import CORS_HEADERS
from backend.errors import UploadError
from backend.logging_config import configure_logging
from backend.models import CardDetails, ErrorResponse, MessageResponse, UploadResponse
from backend.orchestrator import ingest_upload
from backend.services.cards import render_card
from backend.services.payload import header_value


configure_logging()
logger = logging.getLogger(__name__)


def _response(status: int, body: str, content_type: Optional[str] = None) -> Dict[str, Any]:
    headers = dict(CORS_HEADERS)
    if content_type:
        headers["Content-Type"] = content_type
    return {"statusCode": status, "headers": headers, "body": body}


def _json(status: int, payload: Any) -> Dict[str, Any]:
    return _response(status, payload.model_dump_json(), "application/json")


def _get(event: Dict[str, Any]) -> Dict[str, Any]:
    details = CardDetails.from_query(event.get("queryStringParameters"))
    return _response(200, render_card(details), "text/html")


def _post(event: Dict[str, Any]) -> Dict[str, Any]:
    try:
        content_type = header_value(event.get("headers"), "Content-Type")
        grouped = ingest_upload(event.get("body"), bool(event.get("isBase64Encoded")), content_type)
    except UploadError as e:
        logger.info("Rejected upload: %s", e.message)
        return _json(e.status_code, MessageResponse(message=e.message))
    except Exception as e:
        logger.exception("Error parsing upload")
        return _json(500, ErrorResponse(details=str(e)))
    return _json(200, UploadResponse(groupedCards=grouped))


def handler(event, context):
    method = (event.get("httpMethod") or "").upper()
    logger.info("Handling %s request", method or "<none>")

    if method == "GET":
        return _get(event)
    if method == "POST":
        return _post(event)
    if method == "OPTIONS":
        return _response(200, "")
    return _json(405, MessageResponse(message="Method Not Allowed"))
