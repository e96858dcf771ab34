"""
URL Analysis Orchestrator

Runs the per-URL pipeline:
- Category classification
- Query normalisation
- Parameter listing and risky parameter matching
- Reflection probing, one request per parameter
- Full page fetch with the DOM sink heuristic

Stages run sequentially and are gated by ScanConfiguration. Any failure
raises; a partially populated result is never returned. One orchestrator
may be shared by several threads, each analyzing its own URL.
"""
import logging
from typing import Optional
from urllib.parse import urlunsplit

from .agents.probe_client import ProbeClient
from .analyzers.classifier import CategoryClassifier
from .analyzers.parameter_analyzer import ParameterAnalyzer
from .analyzers.risk_catalog import RiskCatalog
from .analyzers.sink_detector import DomSinkDetector
from .config import ScanConfiguration
from .models import AnalysisResult
from .utils.url_utils import normalize_query, parse_url


class URLAnalysisOrchestrator:
    """
    Main orchestrator for single-URL analysis.

    Compiled patterns, the risk catalog and the HTTP client are created
    once here and only read by process().
    """

    def __init__(self, config: Optional[ScanConfiguration] = None,
                 catalog: Optional[RiskCatalog] = None,
                 client: Optional[ProbeClient] = None):
        """
        Initialize the orchestrator

        Args:
            config: Pipeline options; defaults to ScanConfiguration()
            catalog: Risky parameter catalog; loaded from config.catalog_path when omitted
            client: HTTP client; built from config.timeout and config.proxy when omitted

        Raises:
            CatalogLoadError: the catalog could not be loaded
            ValueError: the configuration is invalid
        """
        self.logger = logging.getLogger(self.__class__.__name__)

        self.config = config or ScanConfiguration()
        self.config.validate()

        self.catalog = catalog if catalog is not None else RiskCatalog.load(self.config.catalog_path)
        self.client = client or ProbeClient(timeout=self.config.timeout, proxy=self.config.proxy)

        self.classifier = CategoryClassifier()
        self.parameter_analyzer = ParameterAnalyzer(self.catalog)
        self.sink_detector = DomSinkDetector()

        self.logger.debug(f"Orchestrator ready with {len(self.catalog)} risky parameters")

    def _probe_body(self, url: str) -> bytes:
        return self.client.fetch(url, self.config.user_agent).body

    def process(self, url: str) -> AnalysisResult:
        """
        Analyze a single URL.

        Raises:
            MalformedURLError: url is not a valid URL
            MalformedQueryEncodingError: the query cannot be decoded
            ProbeNetworkError: a probe or the page fetch failed
        """
        config = self.config
        parts = parse_url(url)

        result = AnalysisResult(url=urlunsplit(parts))

        if config.should_categorize:
            result.category = self.classifier.classify(url)

        probe_parts, query = normalize_query(result.url)

        if query and (config.should_scan_risky or config.should_scan_reflected):
            result.params = self.parameter_analyzer.analyze(
                probe_parts,
                query,
                self._probe_body,
                scan_risky=config.should_scan_risky,
                scan_reflected=config.should_scan_reflected,
            )

        if config.should_request:
            response = self.client.fetch(result.url, config.user_agent)
            result.dom = self.sink_detector.scan_for_category(response.body, result.category)
            result.status_code = response.status_code
            result.content_type = response.content_type
            result.content_length = response.content_length

        self.logger.info(
            f"Analyzed {result.url}: category={result.category.value if result.category else '-'}, "
            f"params={len(result.params.names)}, risky={len(result.params.risky)}, "
            f"reflected={len(result.params.reflected)}, dom={len(result.dom)}"
        )
        return result

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> 'URLAnalysisOrchestrator':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
