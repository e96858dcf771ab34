"""
Risky parameter catalog

Maps known-sensitive query parameter names to the vulnerability classes
they are commonly associated with. Loaded once, read-only afterwards.
"""
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..exceptions import CatalogLoadError
from ..models import RiskEntry

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_RESOURCE = "risky_params.json"


class RiskCatalog:
    """Immutable, case-insensitive lookup over RiskEntry records"""

    def __init__(self, entries: Tuple[RiskEntry, ...] = ()):
        self._entries = tuple(entries)
        self._index: Dict[str, RiskEntry] = {}
        for entry in self._entries:
            # first record for a name wins
            self._index.setdefault(entry.param.lower(), entry)

    def lookup(self, name: str) -> Optional[RiskEntry]:
        """Return the catalog entry for a parameter name, or None"""
        return self._index.get(name.lower())

    @property
    def entries(self) -> Tuple[RiskEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RiskEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    @classmethod
    def from_entries(cls, records: List[Dict[str, Any]]) -> 'RiskCatalog':
        """Build a catalog from a flat list of {"param": ..., "risks": [...]} records"""
        if not isinstance(records, list):
            raise CatalogLoadError(f"Catalog must be a JSON array, got {type(records).__name__}")

        entries = []
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                raise CatalogLoadError(f"Catalog record {position} is not an object")

            name = record.get('param', record.get('parameter'))
            if not isinstance(name, str) or not name:
                raise CatalogLoadError(f"Catalog record {position} has no parameter name")

            risks = record.get('risks', [])
            if not isinstance(risks, list) or not all(isinstance(r, str) for r in risks):
                raise CatalogLoadError(f"Catalog record {position} ({name}) has invalid risks")

            entries.append(RiskEntry(param=name, risks=tuple(risks)))

        return cls(tuple(entries))

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'RiskCatalog':
        """
        Load the catalog from a JSON file.

        Args:
            path: Catalog file; None loads the catalog bundled with the package

        Raises:
            CatalogLoadError: the file is missing, unreadable or malformed
        """
        try:
            if path is None:
                raw = resources.files('urlsift.data').joinpath(DEFAULT_CATALOG_RESOURCE).read_text(encoding='utf-8')
                source = f"bundled {DEFAULT_CATALOG_RESOURCE}"
            else:
                raw = Path(path).read_text(encoding='utf-8')
                source = str(path)
        except OSError as e:
            raise CatalogLoadError(f"Failed to read risky parameter catalog: {e}") from e

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Failed to parse risky parameter catalog {source}: {e}") from e

        catalog = cls.from_entries(records)
        logger.debug(f"Loaded {len(catalog)} risky parameters from {source}")
        return catalog
