from __future__ import annotations


class UploadError(Exception):
    """Client-side upload failure surfaced as a 4xx response."""

    status_code = 400
    message = "Upload failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class NoFileUploadedError(UploadError):
    message = "No file uploaded."


class InvalidFileFormatError(UploadError):
    message = "Invalid file format. Upload a valid CSV or Excel file."
