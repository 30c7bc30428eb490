from __future__ import annotations

import logging
from typing import Optional, Union

from .models import GroupedRows
from .services import grouping, payload, tabular


logger = logging.getLogger(__name__)


def ingest_upload(body: Union[str, bytes, None], is_base64: bool, content_type: Optional[str]) -> GroupedRows:
    """Extract the uploaded file, parse it into rows and group them by designation.

    Raises NoFileUploadedError / InvalidFileFormatError for client mistakes.
    """
    content = payload.extract_file_payload(body, is_base64, content_type)
    logger.info("Received upload: %d bytes, content-type=%s", len(content), content_type or "-")
    rows = tabular.parse_rows(content)
    grouped = grouping.group_records(rows)
    logger.info("Grouped %d rows into %d groups", len(rows), len(grouped))
    return grouped
