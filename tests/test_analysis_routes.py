"""
Tests for normalizing AI analysis output.
"""
import pytest
from flask import Flask
from pydantic import ValidationError

from app.analysis import AnalysisNormalizer, create_analysis_module
from knowledge_service.models import AnalysisResult, parse_tag_array, safe_json_loads


class TestAnalysisResult:
    """Validation of the analysis payload model."""

    def test_aliases_and_defaults(self):
        result = AnalysisResult.model_validate({"questionText": "1+1=?", "knowledgePoints": ["方程"]})
        assert result.question_text == "1+1=?"
        assert result.answer_text == ""
        assert result.subject is None
        assert result.knowledge_points == ["方程"]

    def test_field_names_accepted(self):
        result = AnalysisResult(question_text="q", knowledge_points=["A"])
        assert result.knowledge_points == ["A"]

    def test_knowledge_points_cleaned(self):
        result = AnalysisResult.model_validate({"knowledgePoints": [" 方程 ", "", 3, None, "移项"]})
        assert result.knowledge_points == ["方程", "移项"]

    def test_single_string_wrapped(self):
        assert AnalysisResult.model_validate({"knowledgePoints": "数轴"}).knowledge_points == ["数轴"]

    def test_invalid_knowledge_points(self):
        with pytest.raises(ValidationError):
            AnalysisResult.model_validate({"knowledgePoints": {"a": 1}})


class TestTagArrayParsing:
    """Decoding stored knowledgePoints columns."""

    def test_parse_tag_array(self):
        assert parse_tag_array('["A", 1, "B"]') == ["A", "B"]
        assert parse_tag_array(["A"]) == ["A"]
        assert parse_tag_array("invalid") == []
        assert parse_tag_array('{"A": 1}') == []
        assert parse_tag_array(None) == []

    def test_safe_json_loads(self):
        assert safe_json_loads("[1]") == [1]
        assert safe_json_loads("", fallback=[]) == []
        assert safe_json_loads("{bad", fallback="x") == "x"


class TestAnalysisNormalizer:
    """Subject inference plus tag normalization."""

    def test_normalize(self):
        result = AnalysisResult(subject="初中数学", knowledge_points=["方程", "一元一次方程", "我的标签"])
        assert AnalysisNormalizer().normalize(result) == {
            "subject": "math",
            "knowledgePoints": ["一元一次方程", "我的标签"],
            "customTags": ["我的标签"],
        }

    def test_unknown_subject(self):
        result = AnalysisResult(subject="历史", knowledge_points=[])
        assert AnalysisNormalizer().normalize(result)["subject"] is None


class TestAnalysisRoutes:
    """POST /api/analysis/normalize."""

    def setup_method(self):
        module = create_analysis_module()
        flask_app = Flask(__name__)
        flask_app.config['TESTING'] = True
        flask_app.register_blueprint(module["blueprint"])
        self.client = flask_app.test_client()

    def test_normalize_endpoint(self):
        res = self.client.post('/api/analysis/normalize', json={
            "questionText": "解方程 2x+1=5",
            "subject": "Math",
            "knowledgePoints": ["移项", "去分母", "Simple Present"],
        })
        assert res.status_code == 200
        data = res.get_json()
        assert data["subject"] == "math"
        assert data["knowledgePoints"] == ["解一元一次方程", "一般现在时"]
        assert data["customTags"] == []

    def test_non_object_body(self):
        res = self.client.post('/api/analysis/normalize', json=["A"])
        assert res.status_code == 400

    def test_invalid_body(self):
        res = self.client.post('/api/analysis/normalize', json={"knowledgePoints": 5})
        assert res.status_code == 400
        assert res.get_json()["errors"]
