# credcheck/services/reader.py
"""
Client for the content-extraction reader service (Jina AI Reader).

The reader is addressed by prefixing the target URL with a fixed base
endpoint; the Accept header picks plain text or JSON metadata.
"""

import logging
from typing import Any, Dict, Optional

import requests

from credcheck.config import Config
from credcheck.errors import FetchError

logger = logging.getLogger("reader")

FETCH_FAILED = "Failed to fetch article from URL"


class Reader:
    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url or Config.READER_BASE_URL
        self.session = session or requests.Session()

    def _get(self, url: str, accept: str) -> requests.Response:
        reader_url = f"{self.base_url}{url}"
        try:
            resp = self.session.get(reader_url, headers={"Accept": accept})
        except requests.RequestException as e:
            logger.warning("reader request failed for %s: %s", url, str(e)[:300])
            raise FetchError(FETCH_FAILED) from e
        if not 200 <= resp.status_code < 300:
            logger.warning("reader returned %s for %s", resp.status_code, url)
            raise FetchError(FETCH_FAILED)
        return resp

    def fetch_text(self, url: str) -> str:
        return self._get(url, "text/plain").text

    def fetch_json(self, url: str) -> Dict[str, Any]:
        resp = self._get(url, "application/json")
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("reader returned non-JSON body for %s", url)
            raise FetchError(FETCH_FAILED) from e
