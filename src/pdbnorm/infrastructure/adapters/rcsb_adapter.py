"""Adapter for downloading PDB files from the RCSB archive."""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

RCSB_DOWNLOAD_URL = "https://files.rcsb.org/download/{identifier}.pdb"


class StructureFetchError(Exception):
    """Raised when the archive answers with a non-success HTTP status."""

    def __init__(self, identifier: str, status_code: int):
        super().__init__(f"HTTP error! status: {status_code}")
        self.identifier = identifier
        self.status_code = status_code


class RCSBAdapter:
    """Fetches raw PDB text by identifier. One attempt per call, no retries."""

    def __init__(
        self,
        url_template: str = RCSB_DOWNLOAD_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize adapter.

        Args:
            url_template: Download URL with an ``{identifier}`` placeholder
            session: HTTP session to reuse, a new one if omitted
            timeout: Seconds passed to requests; None waits indefinitely
        """
        self.url_template = url_template
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, identifier: str) -> str:
        return self.url_template.format(identifier=identifier)

    def fetch(self, identifier: str) -> str:
        """
        Download the PDB file for an identifier.

        Args:
            identifier: Archive identifier, e.g. "1CRN"

        Returns:
            Decoded file text

        Raises:
            StructureFetchError: If the response status is not successful
            requests.RequestException: If the request itself fails
        """
        url = self.url_for(identifier)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Failed to fetch PDB file for ID: {identifier}: {e}")
            raise

        if not response.ok:
            error = StructureFetchError(identifier, response.status_code)
            logger.error(f"Failed to fetch PDB file for ID: {identifier}: {error}")
            raise error

        return response.text


def fetch_structure(identifier: str) -> str:
    """Download PDB text for an identifier from the default archive."""
    return RCSBAdapter().fetch(identifier)
