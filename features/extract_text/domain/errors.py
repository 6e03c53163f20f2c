"""
Domain errors for the PDF text extraction feature.

Every failure the API reports as "Failed to process PDF" derives from
PdfTextError; the message is passed through to the client.
"""


class PdfTextError(Exception):
    """Base class for extraction failures."""


class InvalidPageRangeError(PdfTextError):
    """Raised when min/max page parameters are not usable."""


class DocumentFetchError(PdfTextError):
    """Raised when the remote document cannot be retrieved."""


class DocumentParseError(PdfTextError):
    """Raised when the document bytes cannot be parsed as a PDF."""
