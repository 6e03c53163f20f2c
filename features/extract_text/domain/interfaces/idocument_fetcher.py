"""
Interface for retrieving raw document bytes from a URL.
"""

from abc import ABC, abstractmethod


class IDocumentFetcher(ABC):
    """Port for downloading a document."""

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """
        Download the document at ``url`` and return its raw body.

        Raises:
            DocumentFetchError: on network errors, timeouts and non-2xx responses
        """
        raise NotImplementedError
