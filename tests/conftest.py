# Shared pytest fixtures
from __future__ import annotations

import base64
import io
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import pytest


BOUNDARY = "----cardsTestBoundary7MA4YWxk"


def make_workbook(sheets: Dict[str, List[Dict[str, Any]]]) -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=name, index=False)
    return buf.getvalue()


def make_multipart(
    content: bytes,
    filename: Optional[str] = "cards.xlsx",
    fields: Optional[Dict[str, str]] = None,
    boundary: str = BOUNDARY,
) -> Tuple[bytes, str]:
    parts: List[bytes] = []
    for name, value in (fields or {}).items():
        parts.append(
            f'--{boundary}\r\nContent-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n'.encode()
        )
    disposition = 'form-data; name="file"'
    if filename is not None:
        disposition += f'; filename="{filename}"'
    parts.append(
        f"--{boundary}\r\nContent-Disposition: {disposition}\r\n"
        f"Content-Type: application/octet-stream\r\n\r\n".encode()
        + content
        + b"\r\n"
    )
    parts.append(f"--{boundary}--\r\n".encode())
    return b"".join(parts), f"multipart/form-data; boundary={boundary}"


def make_event(method: str, **overrides: Any) -> Dict[str, Any]:
    event: Dict[str, Any] = {
        "httpMethod": method,
        "headers": {},
        "queryStringParameters": None,
        "body": None,
        "isBase64Encoded": False,
    }
    event.update(overrides)
    return event


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture()
def sample_csv() -> bytes:
    return b"Name,Designation\nA,Eng\nB,Sales"


@pytest.fixture()
def sample_rows() -> List[Dict[str, Any]]:
    return [
        {"Name": "Asha", "Designation": "Engineer", "Phone": 101},
        {"Name": "Ben", "Designation": "Sales", "Phone": 102},
        {"Name": "Chen", "Designation": "Engineer", "Phone": 103},
        {"Name": "Dana", "Phone": 104},
        {"Name": "Eli", "Designation": "", "Phone": 105},
    ]


@pytest.fixture()
def sample_workbook(sample_rows) -> bytes:
    return make_workbook({"Cards": sample_rows, "Notes": [{"Note": "ignored"}]})


@pytest.fixture()
def garbage_blob() -> bytes:
    # Invalid UTF-8 and no spreadsheet signature
    return bytes([0xFF, 0xFE, 0x00, 0x81, 0x9C, 0xC3, 0x28]) * 16
