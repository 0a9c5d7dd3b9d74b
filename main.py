"""
Entry point for the pathwise engine service.

Run with:
    uvicorn main:app --reload --port 8200
    python main.py
"""
import uvicorn

from config import get_settings
from pathwise.api.main import app  # noqa: F401

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "pathwise.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
