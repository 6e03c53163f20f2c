"""
Document fetcher backed by ``requests``.

Downloads the raw body of a URL with a browser-like User-Agent, since some
servers reject default client identifiers. Every failure (DNS, connection,
timeout, non-2xx status) is reported as a DocumentFetchError; nothing is
retried.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from features.extract_text.domain.errors import DocumentFetchError
from features.extract_text.domain.interfaces import IDocumentFetcher


logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class RequestsDocumentFetcher(IDocumentFetcher):
    """Fetch documents with a plain ``requests.get`` per call."""

    def __init__(self, timeout: Optional[float] = None):
        # None keeps the requests default (wait indefinitely)
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        logger.info(f"fetch: GET {url}")
        try:
            response = requests.get(
                url,
                headers={"User-Agent": USER_AGENT},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise DocumentFetchError(f"Request failed with status code {status}") from e
        except requests.RequestException as e:
            raise DocumentFetchError(str(e) or e.__class__.__name__) from e

        data = response.content
        logger.debug(f"fetch: {url} -> {len(data)} bytes (status={response.status_code})")
        return data
