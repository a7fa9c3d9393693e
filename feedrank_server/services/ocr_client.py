"""
HTTP text extractor for poster images.

POSTs {"image_url": ...} to an OCR endpoint and returns the "text" field of
the JSON response. Errors propagate; ClickbaitAnalyzer turns them into the
empty analysis.
"""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class HttpTextExtractor:
    """TextExtractor backed by a remote OCR service."""

    def __init__(self, endpoint: str, api_key: Optional[str] = None, timeout: float = 10.0):
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout

    def extract_text(self, image_uri: str) -> str:
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        response = requests.post(
            self.endpoint,
            json={"image_url": image_uri},
            headers=headers,
            timeout=self.timeout,
        )
        response.raise_for_status()
        data = response.json()
        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise ValueError(f"OCR response has no text field: {data!r}")
        logger.debug("[analysis] extracted %d chars from %s", len(text), image_uri)
        return text
