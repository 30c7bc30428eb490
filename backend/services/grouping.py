from __future__ import annotations

import math
from typing import Any, Iterable

from ..models import GroupedRows, Row


GROUP_FIELD = "Designation"
FALLBACK_GROUP = "Others"


def group_key(row: Row, field: str = GROUP_FIELD, fallback: str = FALLBACK_GROUP) -> str:
    value: Any = row.get(field)
    if value is None or value == "":
        return fallback
    if isinstance(value, float) and math.isnan(value):
        return fallback
    # Spreadsheet booleans serialize as JSON true/false
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def group_records(rows: Iterable[Row], field: str = GROUP_FIELD, fallback: str = FALLBACK_GROUP) -> GroupedRows:
    grouped: GroupedRows = {}
    for row in rows:
        grouped.setdefault(group_key(row, field, fallback), []).append(row)
    return grouped
