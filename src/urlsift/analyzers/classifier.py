"""
URL category classification by file-extension suffix
"""
import re
from typing import List, Pattern, Tuple

from ..models import Category


def _suffix_pattern(extensions: str) -> Pattern:
    # extension at end of line, optionally followed by a query string
    return re.compile(r'.*?\.(' + extensions + r')(\?.*?|)$', re.MULTILINE)


# Evaluated in order, first match wins
CATEGORY_PATTERNS: List[Tuple[Pattern, Category]] = [
    (_suffix_pattern(r'js'), Category.JS),
    (_suffix_pattern(r'pdf|xlsx|doc|docx|txt'), Category.DOC),
    (_suffix_pattern(r'json|xml|csv'), Category.DATA),
    (_suffix_pattern(r'css'), Category.STYLE),
    (_suffix_pattern(r'jpg|jpeg|png|ico|svg|gif|webp|mp3|mp4|woff|woff2|ttf|eot|tif|tiff'), Category.MEDIA),
    (_suffix_pattern(r'zip|tar|tar\.gz'), Category.ARCHIVE),
]


class CategoryClassifier:
    """Assigns exactly one Category to a URL; never fails"""

    def __init__(self, patterns: List[Tuple[Pattern, Category]] = None):
        self.patterns = tuple(patterns or CATEGORY_PATTERNS)

    def classify(self, url: str) -> Category:
        for pattern, category in self.patterns:
            if pattern.search(url):
                return category
        return Category.ENDPOINT
