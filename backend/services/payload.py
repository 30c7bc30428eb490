from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import List, Mapping, Optional, Union

from python_multipart import parse_form
from python_multipart.exceptions import FormParserError

from ..errors import NoFileUploadedError


logger = logging.getLogger(__name__)

MULTIPART_FORM = "multipart/form-data"


def header_value(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    # API Gateway keeps the client's header casing
    if not headers:
        return None
    wanted = name.lower()
    for k, v in headers.items():
        if k.lower() == wanted:
            return v
    return None


def decode_body(body: Union[str, bytes, None], is_base64: bool) -> bytes:
    if body is None:
        return b""
    if is_base64:
        try:
            return base64.b64decode(body)
        except (binascii.Error, ValueError) as e:
            raise NoFileUploadedError() from e
    if isinstance(body, bytes):
        return body
    return body.encode("utf-8")


def is_multipart(content_type: Optional[str]) -> bool:
    return bool(content_type) and MULTIPART_FORM in content_type.lower()


def _first_file_part(raw: bytes, content_type: str) -> bytes:
    found: List[bytes] = []

    def on_field(field) -> None:
        pass

    def on_file(file) -> None:
        try:
            if found:
                return
            # Large parts are spooled to a temp file; rewind either way
            file.file_object.seek(0)
            data = file.file_object.read()
            if data:
                found.append(data)
        finally:
            file.close()

    headers = {"Content-Type": content_type, "Content-Length": str(len(raw))}
    try:
        parse_form(headers, io.BytesIO(raw), on_field, on_file)
    except FormParserError as e:
        logger.warning("Malformed multipart body: %s", e)
        raise NoFileUploadedError() from e
    if not found:
        raise NoFileUploadedError()
    return found[0]


def extract_file_payload(body: Union[str, bytes, None], is_base64: bool, content_type: Optional[str]) -> bytes:
    raw = decode_body(body, is_base64)
    if is_multipart(content_type):
        payload = _first_file_part(raw, content_type)
    else:
        payload = raw
    if not payload:
        raise NoFileUploadedError()
    logger.debug("Extracted %d byte payload (multipart=%s)", len(payload), is_multipart(content_type))
    return payload
