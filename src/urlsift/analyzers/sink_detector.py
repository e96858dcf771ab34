#!/usr/bin/env python3
"""
DOM Sink Heuristic

Flags response bodies that contain JavaScript patterns commonly involved
in DOM-based XSS: assignments into navigation/markup properties and calls
to code-evaluating or navigating functions.

This is an advisory tripwire tuned for few false negatives. A hit is not
evidence of an exploitable flow, only a reason to look at the code.
"""

import logging
import re
from typing import List, Optional

from ..models import Category

# (1) property assignment: location = ..., src += ..., ["href"] = ...
# (2) function call: eval(..., setTimeout(..., ["open"](...
DOM_SINK_PATTERN = re.compile(
    r'((src|href|data|location|code|value|action)\s*["\'\]]*\s*\+?\s*=)'
    r'|((replace|assign|navigate|getResponseHeader|open(Dialog)?|showModalDialog|'
    r'eval|evaluate|execCommand|execScript|setTimeout|setInterval)\s*["\'\]]*\s*\()'
)

SCANNED_CATEGORIES = frozenset({Category.JS, Category.ENDPOINT})


class DomSinkDetector:
    """Single-pass regex scan of a response body for DOM sink tokens"""

    def __init__(self, pattern: re.Pattern = DOM_SINK_PATTERN):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.pattern = pattern

    @staticmethod
    def applies_to(category: Optional[Category]) -> bool:
        """Only scripts and endpoints are scanned"""
        return category in SCANNED_CATEGORIES

    def scan(self, body: bytes) -> List[str]:
        """
        Scan a body and return the evidence tokens of the first match.

        The whole match comes first, followed by each non-empty capture
        group, duplicates removed. An empty list means no hit.
        """
        text = body.decode('utf-8', errors='replace')
        match = self.pattern.search(text)
        if match is None:
            return []

        tokens: List[str] = []
        for token in (match.group(0),) + match.groups():
            if token and token not in tokens:
                tokens.append(token)

        self.logger.debug(f"DOM sink heuristic hit: {tokens[0]!r}")
        return tokens

    def scan_for_category(self, body: bytes, category: Optional[Category]) -> List[str]:
        """Scan only when the category is one the heuristic applies to"""
        if not self.applies_to(category):
            return []
        return self.scan(body)
