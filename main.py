"""
Entry point for the FastAPI application.

Run with (from project root):

    uvicorn main:app --reload

or ``python main.py`` for the development listener (disabled when
APP_ENV=production, where the hosting platform imports ``main:app`` and owns
the socket).

Exposes:

    GET /api/pdf-text?pdfUrl=...&min=1&max=100
    GET /api/pdf-text-all?pdfUrl=...
    GET /api/health
    GET /
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from features.extract_text.presentation.api import router as pdf_text_router
from features.extract_text.presentation.landing_page import router as landing_page_router
from settings import Settings, get_settings


settings = get_settings()

# Configure logging
handlers = [logging.StreamHandler(sys.stdout)]
if settings.log_file:
    handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=handlers,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="PDF2Text Extractor API", version="1.0.0")

# Any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pdf_text_router)
app.include_router(landing_page_router)


@app.get("/api/health")
def health_check() -> dict:
    return {"status": "ok"}


def run(config: Settings = settings) -> None:
    """Start the development listener unless running in production."""
    if config.is_production:
        logger.info("APP_ENV=production: development listener disabled")
        return

    logger.info(f"Server is running on http://localhost:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
