from __future__ import annotations

from string import Template
from typing import Optional

from ..config import settings
from ..models import CardDetails


# Shown in place of optional fields left empty
FALLBACKS = {
    "category": "General",
    "speakers": "Special Guests",
    "audience": "Open to All",
    "dressCode": "None specified",
    "fees": "Free",
    "agenda": "To be announced",
}

CARD_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <title>$title</title>
    <style>
        body {
            background-image: url('$background');
            background-size: cover;
            background-repeat: no-repeat;
            background-position: center;
            font-family: 'Georgia', serif;
            text-align: center;
            color: #fff;
            padding: 50px;
            margin: 0;
        }
        .overlay {
            background: rgba(0, 0, 0, 0.6);
            padding: 40px;
            border-radius: 15px;
            width: 80%;
            margin: auto;
            box-shadow: 0 0 20px #000;
        }
        .title { font-size: 48px; color: #ffe6ff; margin-bottom: 10px; }
        .subtitle { font-size: 24px; margin: 10px 0; }
        .details { font-size: 18px; margin: 8px 0; }
        .divider { border-top: 1px solid #fff; margin: 20px auto; width: 60%; }
        .date-time {
            font-size: 22px;
            background-color: rgba(255, 255, 255, 0.7);
            color: #4a0a4a;
            display: inline-block;
            padding: 10px 25px;
            border-radius: 10px;
            text-shadow: none;
            margin-top: 15px;
        }
        .btn {
            display: inline-block;
            padding: 12px 24px;
            background-color: #fff;
            color: #4a0a4a;
            text-decoration: none;
            border-radius: 8px;
            margin-top: 20px;
            font-weight: bold;
            box-shadow: 0 0 10px #000;
        }
        img.qr {
            margin-top: 20px;
            width: 140px;
            height: 140px;
        }
    </style>
</head>
<body>
    <div class="overlay">
        <div class="title">$title</div>
        <div class="subtitle">$description</div>
        <div class="divider"></div>
        <div class="subtitle">In honor of: <b>$names</b></div>
        <div class="subtitle">Hosted by: <b>$organizer</b></div>
        <div class="subtitle">Category: <b>$category</b></div>
        <div class="divider"></div>
        <div class="subtitle">Featuring: <b>$speakers</b></div>
        <div class="date-time">$date<br>$time</div>
        <div class="divider"></div>
        <div class="details">Location: <b>$location</b></div>
        <div class="details">Audience: <b>$audience</b></div>
        <div class="details">Dress Code: <b>$dressCode</b></div>
        <div class="details">Fees: <b>$fees</b></div>
        <div class="details">Agenda: <b>$agenda</b></div>
        <div class="divider"></div>
        <div class="details">Contact: <b>$contact</b></div>
        $socialBlock
        $rsvpBlock
        $qrBlock
    </div>
</body>
</html>
""")


def _social_block(url: str) -> str:
    if not url:
        return ""
    return (
        f'<div class="details">Follow us: <a href="{url}" '
        f'style="color: #ffd; text-decoration: underline;">{url}</a></div>'
    )


def _rsvp_block(url: str) -> str:
    return f'<a href="{url}" class="btn">RSVP Now</a>' if url else ""


def _qr_block(src: str) -> str:
    return f'<div><img class="qr" src="{src}" alt="QR Code"></div>' if src else ""


def render_card(details: Optional[CardDetails] = None, background_url: Optional[str] = None) -> str:
    details = details or CardDetails()
    values = details.model_dump()
    for field, fallback in FALLBACKS.items():
        values[field] = values[field] or fallback
    # Values go in as given; no HTML escaping
    return CARD_TEMPLATE.substitute(
        values,
        background=background_url or settings.CARD_BACKGROUND_URL,
        socialBlock=_social_block(details.socialMedia),
        rsvpBlock=_rsvp_block(details.rsvpLink),
        qrBlock=_qr_block(details.qrCode),
    )
