from __future__ import annotations

import io
import logging
import warnings
from datetime import date, datetime, time
from typing import Any, List

import numpy as np
import pandas as pd

from ..errors import InvalidFileFormatError
from ..models import Row


logger = logging.getLogger(__name__)


def _to_native(value: Any) -> Any:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    # Spreadsheets have a single number type; 3.0 reads as 3
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _sheet_rows(df: pd.DataFrame) -> List[Row]:
    rows: List[Row] = []
    for raw in df.to_dict(orient="records"):
        # Empty cells are left out of the record entirely
        row = {str(k): _to_native(v) for k, v in raw.items() if not pd.isna(v)}
        if row:
            rows.append(row)
    return rows


def read_workbook(content: bytes) -> List[Row]:
    """Rows of the first sheet, header taken from the first row."""
    df = pd.read_excel(io.BytesIO(content), sheet_name=0)
    return _sheet_rows(df)


def read_csv_text(content: bytes) -> List[Row]:
    text = content.decode("utf-8-sig")
    if not text.strip():
        return []
    # A row wider than the header is an error, not a truncation
    with warnings.catch_warnings():
        warnings.simplefilter("error", pd.errors.ParserWarning)
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
    df = df.fillna("")
    return [{str(k): v for k, v in raw.items()} for raw in df.to_dict(orient="records")]


def parse_rows(content: bytes) -> List[Row]:
    try:
        rows = read_workbook(content)
        logger.info("Parsed workbook upload: %d rows", len(rows))
        return rows
    except Exception as excel_err:
        logger.debug("Not a workbook (%s); trying CSV", excel_err)

    try:
        rows = read_csv_text(content)
    except (
        UnicodeDecodeError,
        pd.errors.ParserError,
        pd.errors.ParserWarning,
        pd.errors.EmptyDataError,
        ValueError,
    ) as csv_err:
        logger.warning("Upload is neither a workbook nor CSV: %s", csv_err)
        raise InvalidFileFormatError() from csv_err
    logger.info("Parsed CSV upload: %d rows", len(rows))
    return rows
