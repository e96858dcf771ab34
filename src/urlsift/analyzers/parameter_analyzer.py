"""
Query parameter analysis: listing, risky name matching and reflection probing
"""
import logging
from typing import Callable, List
from urllib.parse import SplitResult

from ..models import ParameterFindings, ReflectedFinding, RiskEntry
from ..utils.url_utils import Query, build_probe_url
from .risk_catalog import RiskCatalog

# Marker written into one parameter at a time; improbable in normal content
PROBE_MARKER = "iy3j4h234hjb23234"

ProbeFn = Callable[[str], bytes]


class ParameterAnalyzer:
    """
    Analyzes the parameters of one parsed query.

    Reflection probing builds a fresh copy of the query for every parameter,
    so only the parameter under test carries the marker and the caller's
    query map is never modified.
    """

    def __init__(self, catalog: RiskCatalog, marker: str = PROBE_MARKER):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.catalog = catalog
        self.marker = marker

    def list_parameters(self, query: Query) -> List[str]:
        """Distinct parameter names in the order the query map yields them"""
        return list(query)

    def find_risky(self, names: List[str]) -> List[RiskEntry]:
        """Catalog entries matching the given names, case-insensitively"""
        risky = []
        for name in names:
            entry = self.catalog.lookup(name)
            if entry is not None:
                risky.append(entry)
        return risky

    def find_reflected(self, parts: SplitResult, query: Query, probe: ProbeFn) -> List[ReflectedFinding]:
        """
        Probe each parameter in turn and report those echoed back verbatim.

        Args:
            parts: Split URL the probe URLs are built from
            query: Parsed query of that URL
            probe: Callable fetching a URL and returning its complete body

        Any exception raised by probe propagates and ends the scan.
        """
        reflected = []
        marker = self.marker.encode()
        for name in query:
            probe_url = build_probe_url(parts, query, name, self.marker)
            body = probe(probe_url)
            if marker in body:
                self.logger.debug(f"Parameter {name!r} reflected via {probe_url}")
                reflected.append(ReflectedFinding(param=name, url=probe_url))
        return reflected

    def analyze(self, parts: SplitResult, query: Query, probe: ProbeFn,
                scan_risky: bool = True, scan_reflected: bool = True) -> ParameterFindings:
        """Run the enabled parameter stages; an empty query yields empty findings"""
        findings = ParameterFindings()
        if not query:
            return findings

        if scan_risky:
            findings.names = self.list_parameters(query)
            findings.risky = self.find_risky(findings.names)

        if scan_reflected:
            findings.reflected = self.find_reflected(parts, query, probe)

        return findings
