from abc import ABC, abstractmethod
from typing import List, Iterable

from zhengyu.schema import PreserveAnalysis


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class ZhengyuError(Exception):
    """Base class for errors raised by the zhengyu package."""

class DictionaryNotReadyError(ZhengyuError):
    """Raised when a conversion is attempted before the romanization dictionary is loaded."""
    def __init__(self, reason: str = "dictionary has not been initialised"):
        super().__init__(f"Romanization resources not ready: {reason}")
        self.reason = reason

class DictionaryLoadError(ZhengyuError):
    """Raised when the romanization dictionary cannot be built from its source."""
    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load romanization dictionary from '{source}': {reason}")
        self.source = source
        self.reason = reason

class PreserveSourceError(ZhengyuError):
    """Raised by a preserve-term source that cannot produce an analysis."""


class BaseRomanizationLookup(ABC):
    """Abstract base class for character-to-romanization lookup"""

    @abstractmethod
    def lookup(self, char: str) -> str:
        """Return the romanization of *char*, or *char* itself when unknown"""
        pass

    def lookup_many(self, chars: Iterable[str]) -> List[str]:
        """Batch form of lookup; same order and length as the input"""
        return [self.lookup(char) for char in chars]

class BasePreserveSource(ABC):
    """Abstract base class for preserved-term extraction (nouns, pronouns, numerals)"""

    @abstractmethod
    def analyze(self, text: str) -> PreserveAnalysis:
        """Return the spans of *text* to keep as logographs, plus particle spans"""
        pass

    def get_preserved_terms(self, text: str) -> List[str]:
        return list(self.analyze(text).terms)

    @property
    def name(self) -> str:
        return type(self).__name__
