"""Tests for NLP base classes and exceptions."""
import pytest
from zhengyu.nlp.base import (
    BasePreserveSource,
    BaseRomanizationLookup,
    DictionaryLoadError,
    DictionaryNotReadyError,
    PreserveSourceError,
    ZhengyuError,
)
from zhengyu.schema import PreserveAnalysis


class TestBaseRomanizationLookup:
    """Test BaseRomanizationLookup abstract class."""

    def test_lookup_not_implemented(self):
        with pytest.raises(TypeError):
            BaseRomanizationLookup()

    def test_concrete_implementation(self):
        class UpperLookup(BaseRomanizationLookup):
            def lookup(self, char: str):
                return char.upper()

        lookup = UpperLookup()
        assert lookup.lookup("a") == "A"
        assert lookup.lookup_many("ab") == ["A", "B"]
        assert lookup.lookup_many("") == []


class TestBasePreserveSource:
    """Test BasePreserveSource abstract class."""

    def test_analyze_not_implemented(self):
        with pytest.raises(TypeError):
            BasePreserveSource()

    def test_concrete_implementation(self):
        class EverySource(BasePreserveSource):
            def analyze(self, text: str):
                return PreserveAnalysis(terms=list(text))

        source = EverySource()
        assert source.get_preserved_terms("我你") == ["我", "你"]
        assert source.name == "EverySource"


class TestExceptions:
    """Test the package exception hierarchy."""

    def test_not_ready_error(self):
        error = DictionaryNotReadyError()
        assert isinstance(error, ZhengyuError)
        assert "Romanization resources not ready" in str(error)
        assert error.reason == "dictionary has not been initialised"

    def test_not_ready_custom_reason(self):
        assert "still loading" in str(DictionaryNotReadyError("still loading"))

    def test_load_error(self):
        error = DictionaryLoadError("list.tsv", "file not found")
        assert isinstance(error, ZhengyuError)
        assert error.source == "list.tsv"
        assert error.reason == "file not found"
        assert "list.tsv" in str(error)
        assert "file not found" in str(error)

    def test_preserve_source_error(self):
        assert issubclass(PreserveSourceError, ZhengyuError)
