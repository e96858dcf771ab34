"""
URL manipulation utilities
"""
import re
from typing import Dict, List, Tuple
from urllib.parse import SplitResult, parse_qs, unquote_plus, urlencode, urlsplit, urlunsplit

from ..exceptions import MalformedQueryEncodingError, MalformedURLError

Query = Dict[str, List[str]]

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')
_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def parse_url(url: str) -> SplitResult:
    """
    Split a URL, rejecting input that is not syntactically valid.

    The query is not checked here; its encoding is validated by
    normalize_query().
    """
    if _CONTROL_CHARS.search(url):
        raise MalformedURLError(f"Invalid control character in URL: {url!r}")
    if url.startswith(':'):
        raise MalformedURLError(f"Missing protocol scheme: {url!r}")

    try:
        parts = urlsplit(url)
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError as e:
        raise MalformedURLError(f"Invalid URL {url!r}: {e}") from e

    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE.search(component):
            raise MalformedURLError(f"Invalid URL escape in {url!r}")

    return parts


def normalize_query(url: str) -> Tuple[SplitResult, Query]:
    """
    Percent-decode the whole URL, split it again and parse its query.

    Decoding first means doubly-encoded parameter names and values are
    compared and probed in their plain form.

    Returns:
        The split decoded URL and an ordered {name: [values]} map
    """
    if _BAD_ESCAPE.search(url):
        raise MalformedQueryEncodingError(f"Invalid percent-encoding in {url!r}")

    decoded = unquote_plus(url)
    try:
        parts = urlsplit(decoded)
    except ValueError as e:
        raise MalformedQueryEncodingError(f"Cannot re-parse decoded URL {decoded!r}: {e}") from e

    if _BAD_ESCAPE.search(parts.query):
        raise MalformedQueryEncodingError(f"Invalid percent-encoding in query {parts.query!r}")

    query = parse_qs(parts.query, keep_blank_values=True)

    return parts, query


def encode_query(query: Query) -> str:
    """Form-encode a query map with keys in sorted order"""
    return urlencode(sorted(query.items()), doseq=True)


def build_probe_url(parts: SplitResult, query: Query, param_name: str, payload: str) -> str:
    """Return the URL with one parameter's value replaced by payload; query is left untouched"""
    probe_query = {name: list(values) for name, values in query.items()}
    probe_query[param_name] = [payload]
    return urlunsplit(parts._replace(query=encode_query(probe_query)))
