"""
Exceptions raised by the URL analysis pipeline
"""
from typing import Optional


class URLSiftError(Exception):
    """Base exception for urlsift"""
    pass


class MalformedURLError(URLSiftError):
    """Raised when the input is not a syntactically valid URL"""
    pass


class MalformedQueryEncodingError(URLSiftError):
    """Raised when percent-decoding or re-parsing the query string fails"""
    pass


class ProbeNetworkError(URLSiftError):
    """Raised when a probe or page fetch fails at the transport level"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class CatalogLoadError(URLSiftError):
    """Raised when the risky parameter catalog cannot be loaded"""
    pass
