"""
FastAPI routes for the PDF text extraction feature.

Both routes are plain ``def`` handlers, so FastAPI runs them in its thread
pool and a slow download never blocks other requests.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from features.extract_text.application.dtos import (
    ExtractAllTextRequestDTO,
    ExtractPageRangeRequestDTO,
    ExtractTextResponseDTO,
)
from features.extract_text.application.use_cases import (
    ExtractAllTextUseCase,
    ExtractPageRangeTextUseCase,
)
from features.extract_text.infrastructure.http_document_fetcher_requests import (
    RequestsDocumentFetcher,
)
from features.extract_text.infrastructure.pdf_text_extractor_pymupdf import PyMuPdfPageReader
from settings import get_settings


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["pdf-text"])

MISSING_PDF_URL = "Missing pdfUrl parameter"
PROCESSING_FAILED = "Failed to process PDF"


class ExtractTextResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None


def build_extract_page_range_use_case() -> ExtractPageRangeTextUseCase:
    """Build ranged extraction use case with requests + PyMuPDF adapters."""
    return ExtractPageRangeTextUseCase(
        fetcher=RequestsDocumentFetcher(timeout=get_settings().fetch_timeout),
        reader=PyMuPdfPageReader(),
    )


def build_extract_all_text_use_case() -> ExtractAllTextUseCase:
    """Build whole-document extraction use case with requests + PyMuPDF adapters."""
    return ExtractAllTextUseCase(
        fetcher=RequestsDocumentFetcher(timeout=get_settings().fetch_timeout),
        reader=PyMuPdfPageReader(),
    )


def _missing_pdf_url() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": MISSING_PDF_URL})


def _processing_failed(e: Exception) -> JSONResponse:
    body = ErrorResponse(error=PROCESSING_FAILED, message=str(e))
    return JSONResponse(status_code=500, content=body.model_dump())


@router.get(
    "/pdf-text",
    response_model=ExtractTextResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def extract_pdf_text(
    pdf_url: Optional[str] = Query(None, alias="pdfUrl"),
    min_page: Optional[str] = Query(None, alias="min"),
    max_page: Optional[str] = Query(None, alias="max"),
    use_case: ExtractPageRangeTextUseCase = Depends(build_extract_page_range_use_case),
):
    """
    Extract text from pages [min, max] (1-indexed, inclusive) of a remote PDF.

    Defaults: min=1, max=100. If min equals max, exactly that page is returned.
    """
    if not pdf_url:
        return _missing_pdf_url()

    dto_in = ExtractPageRangeRequestDTO(pdf_url=pdf_url, min_page=min_page, max_page=max_page)

    try:
        dto_out: ExtractTextResponseDTO = use_case.execute(dto_in)
    except Exception as e:
        logger.exception(f"Error processing PDF: {pdf_url}")
        return _processing_failed(e)

    return ExtractTextResponse(text=dto_out.text)


@router.get(
    "/pdf-text-all",
    response_model=ExtractTextResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def extract_pdf_text_all(
    pdf_url: Optional[str] = Query(None, alias="pdfUrl"),
    use_case: ExtractAllTextUseCase = Depends(build_extract_all_text_use_case),
):
    """Extract text from every page of a remote PDF."""
    if not pdf_url:
        return _missing_pdf_url()

    try:
        dto_out: ExtractTextResponseDTO = use_case.execute(ExtractAllTextRequestDTO(pdf_url=pdf_url))
    except Exception as e:
        logger.exception(f"Error processing PDF: {pdf_url}")
        return _processing_failed(e)

    return ExtractTextResponse(text=dto_out.text)
