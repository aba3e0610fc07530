"""
Tests for tag normalization and alias mapping.
"""
import pytest

from knowledge_service import is_catalog_tag, normalize_tag, normalize_tags
from knowledge_service.curriculum import get_catalog
from knowledge_service.tag_normalizer import find_entry


class TestNormalizeTag:
    """Single-tag normalization."""

    def test_canonical_names_are_fixed_points(self):
        for entry in get_catalog().iter_entries():
            assert normalize_tag(entry.name) == entry.name

    def test_aliases_map_to_canonical(self):
        for entry in get_catalog().iter_entries():
            for alias in entry.aliases:
                assert normalize_tag(alias) == entry.name

    @pytest.mark.parametrize("alias,expected", [
        ("方程", "一元一次方程"),
        ("移项", "解一元一次方程"),
        ("函数", "函数的概念"),
        ("Simple Present", "一般现在时"),
        ("惯性", "牛顿第一定律"),
    ])
    def test_known_aliases(self, alias, expected):
        assert normalize_tag(alias) == expected

    @pytest.mark.parametrize("text", ["我的自定义标签", "simple present", " 方程", "方程 "])
    def test_unknown_text_falls_back_to_itself(self, text):
        assert normalize_tag(text) == text

    def test_empty_string_matches_first_entry(self):
        assert normalize_tag("") == "正数和负数"
        assert find_entry("").name == "正数和负数"


class TestNormalizeTags:
    """List normalization with deduplication."""

    def test_duplicates_removed(self):
        assert normalize_tags(["X", "X"]) == ["X"]

    def test_alias_and_canonical_collapse(self):
        result = normalize_tags(["方程", "一元一次方程", "移项", "自定义"])
        assert result == ["一元一次方程", "解一元一次方程", "自定义"]

    def test_first_occurrence_order_kept(self):
        result = normalize_tags(["B", "A", "B", "C", "A"])
        assert result == ["B", "A", "C"]

    def test_empty_input(self):
        assert normalize_tags([]) == []
        assert normalize_tags(None) == []


class TestIsCatalogTag:
    """Catalog membership by name or alias."""

    def test_name_and_alias(self):
        assert is_catalog_tag("一元一次方程")
        assert is_catalog_tag("方程")
        assert is_catalog_tag("Passive Voice")

    def test_unknown_and_empty(self):
        assert not is_catalog_tag("自定义标签")
        assert not is_catalog_tag("")
