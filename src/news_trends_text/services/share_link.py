"""
Share Link Service

Encodes the raw bulletin text (not the parsed structure) into a URL query
parameter and back.

Design:
- Wire format is base64(encodeURIComponent(text)), so links produced by the
  browser front end decode here and vice versa
- The text comes back byte-for-byte; parsing it is the caller's job
"""

import base64
import binascii
import logging
from typing import Optional
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit, urlunsplit

from news_trends_text.config import get_app_config

logger = logging.getLogger(__name__)

SHARE_PARAM = 'data'

# Characters encodeURIComponent leaves alone besides A-Z a-z 0-9 - _ . ~
_URI_COMPONENT_SAFE = "!*'()"


class ShareLinkError(ValueError):
    """Raised when share data cannot be decoded back to text."""


class ShareLinkService:
    """
    Service for building and reading share links.

    Usage:
        service = ShareLinkService(base_url="https://example.com/report")
        url = service.build_url(text)
        assert service.decode_url(url) == text
    """

    def __init__(self, base_url: Optional[str] = None):
        """
        Initialize share link service.

        Args:
            base_url: Page the links point at; defaults to AppConfig.share_base_url
        """
        self.base_url = base_url if base_url is not None else get_app_config().share_base_url

    @staticmethod
    def encode(text: str) -> str:
        """
        Encode text as share data.

        Example:
            >>> ShareLinkService.encode("Hi!")
            'SGkh'
        """
        escaped = quote(text, safe=_URI_COMPONENT_SAFE)
        return base64.b64encode(escaped.encode('ascii')).decode('ascii')

    @staticmethod
    def decode(data: str) -> str:
        """
        Decode share data back to text.

        A ``+`` turned into a space by form-style query decoding is restored
        before base64 decoding.

        Raises:
            ShareLinkError: If data is not valid base64 or not percent-encoded UTF-8
        """
        candidate = data.replace(' ', '+').strip()
        try:
            escaped = base64.b64decode(candidate, validate=True).decode('ascii')
            return unquote(escaped, errors='strict')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ShareLinkError(f"Invalid share data: {e}") from e

    def build_url(self, text: str) -> str:
        """
        Build a share URL carrying the text in the ``data`` parameter.

        Existing query parameters of the base URL are replaced.
        """
        parts = urlsplit(self.base_url)
        query = urlencode({SHARE_PARAM: self.encode(text)})
        return urlunsplit((parts.scheme, parts.netloc, parts.path, query, ''))

    def decode_url(self, url: str) -> str:
        """
        Extract and decode the ``data`` parameter of a share URL.

        Raises:
            ShareLinkError: If the URL has no data parameter or it cannot be decoded
        """
        params = parse_qs(urlsplit(url).query)
        values = params.get(SHARE_PARAM)
        if not values:
            raise ShareLinkError(f"No '{SHARE_PARAM}' parameter in share URL: {url}")

        text = self.decode(values[0])
        logger.debug(f"Decoded {len(text):,} chars from share URL")
        return text
