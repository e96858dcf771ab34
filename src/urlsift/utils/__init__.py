"""
urlsift utilities
"""

from .url_utils import parse_url, normalize_query, encode_query, build_probe_url

__all__ = [
    'parse_url',
    'normalize_query',
    'encode_query',
    'build_probe_url'
]
