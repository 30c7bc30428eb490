from __future__ import annotations


# Sent on every response, errors included
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
