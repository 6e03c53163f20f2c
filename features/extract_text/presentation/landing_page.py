"""
Static HTML landing page describing how to call the API.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse


router = APIRouter(tags=["landing"])

LANDING_PAGE_HTML = """<!DOCTYPE html>
<html>
    <head>
        <title>PDF2Text Extractor API</title>
        <style>
            body { font-family: Arial, sans-serif; max-width: 800px; margin: 40px auto; padding: 0 20px; line-height: 1.6; }
            code { background: #f4f4f4; padding: 2px 5px; border-radius: 3px; }
            .endpoint { margin: 20px 0; padding: 15px; border: 1px solid #ddd; border-radius: 5px; }
        </style>
    </head>
    <body>
        <h1>PDF2Text Extractor API</h1>
        <p>Extract text content from PDF files using the following endpoints:</p>

        <div class="endpoint">
            <h3>Extract text from specific pages:</h3>
            <code>GET /api/pdf-text?pdfUrl=[URL]&amp;min=[START_PAGE]&amp;max=[END_PAGE]</code>
            <p>Example: <a href="/api/pdf-text?pdfUrl=https://example.com/file.pdf&amp;min=1&amp;max=5">/api/pdf-text?pdfUrl=https://example.com/file.pdf&amp;min=1&amp;max=5</a></p>
            <p>Defaults: <code>min=1</code>, <code>max=100</code>. If min equals max, the API extracts text from that single page.</p>
        </div>

        <div class="endpoint">
            <h3>Extract text from entire PDF:</h3>
            <code>GET /api/pdf-text-all?pdfUrl=[URL]</code>
            <p>Example: <a href="/api/pdf-text-all?pdfUrl=https://example.com/file.pdf">/api/pdf-text-all?pdfUrl=https://example.com/file.pdf</a></p>
        </div>

        <div class="endpoint">
            <h3>Health check:</h3>
            <code>GET /api/health</code>
        </div>
    </body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def landing_page() -> str:
    return LANDING_PAGE_HTML
