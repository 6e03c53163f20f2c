"""
Domain interfaces (ports) for the PDF text extraction feature.

- Domain defines interfaces (ports)
- Infrastructure implements interfaces (adapters)
- Application orchestrates via interfaces
"""

from .idocument_fetcher import IDocumentFetcher
from .ipage_reader import IPageReader

__all__ = ["IDocumentFetcher", "IPageReader"]
