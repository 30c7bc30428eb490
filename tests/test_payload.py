from __future__ import annotations

import pytest

from backend.errors import NoFileUploadedError
from backend.services.payload import decode_body, extract_file_payload, header_value, is_multipart
from conftest import BOUNDARY, b64, make_multipart


def test_raw_body_is_whole_payload(sample_csv):
    assert extract_file_payload(sample_csv.decode(), False, "text/csv") == sample_csv


def test_base64_body_is_decoded(sample_csv):
    assert extract_file_payload(b64(sample_csv), True, "text/csv") == sample_csv


def test_missing_content_type_treated_as_raw(sample_csv):
    assert extract_file_payload(sample_csv, False, None) == sample_csv


def test_multipart_picks_file_part(sample_csv):
    body, ctype = make_multipart(sample_csv, filename="cards.csv", fields={"note": "hello"})
    assert extract_file_payload(body, False, ctype) == sample_csv


def test_multipart_binary_round_trips_exactly():
    content = bytes(range(256)) + b"\r\n--not-a-boundary\r\n\r\n" + bytes(range(255, -1, -1))
    body, ctype = make_multipart(content)
    assert extract_file_payload(b64(body), True, ctype) == content


def test_multipart_without_file_part():
    body, ctype = make_multipart(b"just a field", filename=None)
    with pytest.raises(NoFileUploadedError):
        extract_file_payload(body, False, ctype)


def test_multipart_without_boundary(sample_csv):
    body, _ = make_multipart(sample_csv)
    with pytest.raises(NoFileUploadedError):
        extract_file_payload(body, False, "multipart/form-data")


@pytest.mark.parametrize("body", [None, "", b""])
def test_empty_body(body):
    with pytest.raises(NoFileUploadedError):
        extract_file_payload(body, False, "text/csv")


def test_empty_file_part():
    body, ctype = make_multipart(b"")
    with pytest.raises(NoFileUploadedError):
        extract_file_payload(body, False, ctype)


def test_decode_body_passes_bytes_through():
    assert decode_body(b"\xff\x00", False) == b"\xff\x00"


def test_header_lookup_ignores_case():
    headers = {"content-type": "text/csv"}
    assert header_value(headers, "Content-Type") == "text/csv"
    assert header_value(None, "Content-Type") is None


def test_is_multipart():
    assert is_multipart("Multipart/Form-Data; boundary=x")
    assert not is_multipart("text/csv")
    assert not is_multipart(None)


def test_every_file_part_is_closed(monkeypatch):
    from python_multipart.multipart import File

    closed = []
    original_close = File.close

    def tracking_close(self):
        closed.append(self.file_name)
        original_close(self)

    monkeypatch.setattr(File, "close", tracking_close)
    body = (
        f'--{BOUNDARY}\r\nContent-Disposition: form-data; name="a"; filename="first.csv"\r\n\r\n'
        f"Name\r\nA\r\n"
        f'--{BOUNDARY}\r\nContent-Disposition: form-data; name="b"; filename="second.csv"\r\n\r\n'
        f"Name\r\nB\r\n"
        f"--{BOUNDARY}--\r\n"
    ).encode()
    payload = extract_file_payload(body, False, f"multipart/form-data; boundary={BOUNDARY}")
    assert payload == b"Name\r\nA"
    assert set(closed) == {b"first.csv", b"second.csv"}
