"""
Analysis result data models
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Category(Enum):
    """Coarse resource type of a URL"""
    JS = "js"
    DOC = "doc"
    DATA = "data"
    STYLE = "style"
    MEDIA = "media"
    ARCHIVE = "archive"
    ENDPOINT = "endpoint"


@dataclass(frozen=True)
class RiskEntry:
    """A catalog record: parameter name and the risks it is known for"""
    param: str
    risks: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.param:
            data['param'] = self.param
        if self.risks:
            data['risks'] = list(self.risks)
        return data


@dataclass(frozen=True)
class ReflectedFinding:
    """A parameter whose probe marker came back verbatim in the response body"""
    param: str
    url: str  # the probed URL, marker included

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.param:
            data['param'] = self.param
        if self.url:
            data['url'] = self.url
        return data


@dataclass
class ParameterFindings:
    """Query parameter findings for a single URL (`names` serialises as "list")"""
    names: List[str] = field(default_factory=list)
    risky: List[RiskEntry] = field(default_factory=list)
    reflected: List[ReflectedFinding] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.names or self.risky or self.reflected)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.names:
            data['list'] = list(self.names)
        if self.risky:
            data['risky'] = [entry.to_dict() for entry in self.risky]
        if self.reflected:
            data['reflected'] = [finding.to_dict() for finding in self.reflected]
        return data


@dataclass
class AnalysisResult:
    """
    Aggregate output of one pipeline run.

    Fields left at their zero value were either disabled or produced
    nothing, so the serialised shape tells which stages ran.
    """
    url: str = ""
    category: Optional[Category] = None
    status_code: int = 0
    content_type: str = ""
    content_length: int = 0
    params: ParameterFindings = field(default_factory=ParameterFindings)
    dom: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise with omit-if-empty semantics"""
        data: Dict[str, Any] = {}
        if self.url:
            data['url'] = self.url
        if self.category is not None:
            data['category'] = self.category.value
        if self.status_code:
            data['status_code'] = self.status_code
        if self.content_type:
            data['content_type'] = self.content_type
        if self.content_length:
            data['content_length'] = self.content_length
        if not self.params.is_empty():
            data['params'] = self.params.to_dict()
        if self.dom:
            data['dom'] = list(self.dom)
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
