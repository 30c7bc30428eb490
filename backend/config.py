from __future__ import annotations

import os

from dotenv import load_dotenv


load_dotenv()

DEFAULT_BACKGROUND_URL = (
    "https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSbwalz6n2X0oTW8HMlFXGCL7tpLGtfXQMc2Q&s"
)


def _running_on_lambda() -> bool:
    return bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME"))


class Settings:
    """Environment-driven settings, read once at import."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = os.getenv("LOG_FORMAT", "json" if _running_on_lambda() else "text").lower()
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    CARD_BACKGROUND_URL = os.getenv("CARD_BACKGROUND_URL", "").strip() or DEFAULT_BACKGROUND_URL


settings = Settings()
