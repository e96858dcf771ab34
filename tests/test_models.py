"""
Unit tests for result serialisation
"""

import json

from urlsift.models import AnalysisResult, Category, ParameterFindings, ReflectedFinding, RiskEntry


class TestAnalysisResultSerialisation:

    def test_empty_fields_are_omitted(self):
        result = AnalysisResult(url="http://example.test/")
        assert result.to_dict() == {"url": "http://example.test/"}

    def test_full_record(self):
        result = AnalysisResult(
            url="http://example.test/app.js?v=1",
            category=Category.JS,
            status_code=200,
            content_type="application/javascript",
            content_length=512,
            params=ParameterFindings(
                names=["v"],
                risky=[],
                reflected=[ReflectedFinding(param="v", url="http://example.test/app.js?v=x")],
            ),
            dom=["eval(", "eval"],
        )

        assert json.loads(result.to_json()) == {
            "url": "http://example.test/app.js?v=1",
            "category": "js",
            "status_code": 200,
            "content_type": "application/javascript",
            "content_length": 512,
            "params": {
                "list": ["v"],
                "reflected": [{"param": "v", "url": "http://example.test/app.js?v=x"}],
            },
            "dom": ["eval(", "eval"],
        }

    def test_risk_entry_without_risks(self):
        assert RiskEntry(param="debug").to_dict() == {"param": "debug"}
