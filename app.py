from __future__ import annotations

import uvicorn

from backend.config import settings


if __name__ == "__main__":
    # Run the FastAPI app defined in backend/app.py as `app`
    uvicorn.run("backend.app:app", host=settings.HOST, port=settings.PORT, workers=1)
