from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel


Row = Dict[str, Any]
GroupedRows = Dict[str, List[Row]]


class CardDetails(BaseModel):
    title: str = "Event Invitation"
    names: str = "John & Jane"
    date: str = "2025-05-18"
    time: str = "15:10"
    location: str = "San Francisco, CA"
    description: str = "Join us for this special event."
    organizer: str = "Event Organizer"
    contact: str = "123-456-7890"
    rsvpLink: str = ""
    category: str = ""
    socialMedia: str = ""
    agenda: str = ""
    speakers: str = ""
    fees: str = ""
    audience: str = ""
    dressCode: str = ""
    qrCode: str = ""

    @classmethod
    def from_query(cls, params: Optional[Mapping[str, Any]]) -> "CardDetails":
        # Unknown parameters are dropped; None means "not given"
        known = {
            k: str(v)
            for k, v in (params or {}).items()
            if k in cls.model_fields and v is not None
        }
        return cls(**known)


class UploadResponse(BaseModel):
    message: str = "Successfully processed bulk business cards."
    groupedCards: GroupedRows


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str = "Internal Server Error"
    details: str


class HealthResponse(BaseModel):
    status: str
