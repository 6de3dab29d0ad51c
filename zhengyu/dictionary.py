import os
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, Optional

from zhengyu import JYUTPING_TABLE_PATH
from zhengyu.logger import logger
from zhengyu.nlp.base import (
    BaseRomanizationLookup,
    DictionaryLoadError,
    DictionaryNotReadyError,
)

PYCANTONESE_SOURCE = "pycantonese"

@dataclass
class JyutpingEntry:
    character: str
    jyutping: str
    initial: Optional[str] = None
    final: Optional[str] = None
    tone: Optional[str] = None


class BaseDictionaryParser(ABC):
    """Abstract base class for romanization table parsers."""

    def __init__(self, source_path: str):
        self.source_path = source_path

    @abstractmethod
    def parse(self) -> Iterable[JyutpingEntry]:
        """Parse the dictionary source and yield JyutpingEntry objects."""
        pass

    def read_lines(self) -> Iterable[str]:
        with open(self.source_path, "r", encoding="utf-8") as f:
            for line in f:
                yield line


class LshkTableParser(BaseDictionaryParser):
    """Parser for the LSHK Cantonese-Jyutping table.

    Columns: CH UCODE JP INIT FINL TONE DESC DESC_JP
    """

    def parse(self) -> Iterable[JyutpingEntry]:
        return self.parse_lines(self.read_lines())

    @staticmethod
    def parse_lines(lines: Iterable[str]) -> Iterable[JyutpingEntry]:
        for line in lines:
            line = line.strip()
            if not line or line.startswith("CH\t"):
                continue
            parts = line.split("\t")
            if len(parts) < 3:
                continue
            char, jyutping = parts[0], parts[2]
            if not char or not jyutping:
                continue
            yield JyutpingEntry(
                character=char,
                jyutping=jyutping,
                initial=parts[3] if len(parts) > 3 else None,
                final=parts[4] if len(parts) > 4 else None,
                tone=parts[5] if len(parts) > 5 else None,
            )


class JyutpingDictionary(BaseRomanizationLookup):
    """In-memory character → jyutping table."""

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._entries: Dict[str, str] = dict(entries or {})

    @classmethod
    def from_entries(cls, entries: Iterable[JyutpingEntry]) -> "JyutpingDictionary":
        table: Dict[str, str] = {}
        for entry in entries:
            # Polyphones: the first reading listed is the default one
            table.setdefault(entry.character, entry.jyutping)
        return cls(table)

    @classmethod
    def from_parser(cls, parser: BaseDictionaryParser) -> "JyutpingDictionary":
        return cls.from_entries(parser.parse())

    def lookup(self, char: str) -> str:
        if char.isascii():
            return char
        return self._entries.get(char, char)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, char: str) -> bool:
        return char in self._entries


class PyCantoneseLookup(BaseRomanizationLookup):
    """Character lookup backed by pycantonese's bundled corpus data."""

    def __init__(self):
        import pycantonese
        self._characters_to_jyutping = pycantonese.characters_to_jyutping
        self._cached = lru_cache(maxsize=None)(self._lookup_uncached)

    def _lookup_uncached(self, char: str) -> str:
        pairs = self._characters_to_jyutping(char)
        if pairs and pairs[0][1]:
            return pairs[0][1]
        return char

    def lookup(self, char: str) -> str:
        if char.isascii():
            return char
        return self._cached(char)


# ──────────────────────────────────────────────────────────────────────────────
# PROCESS-WIDE DICTIONARY
# ──────────────────────────────────────────────────────────────────────────────
_dictionary: Optional[BaseRomanizationLookup] = None
_lock = threading.Lock()


def default_source() -> str:
    return os.getenv("ZHENGYU_JYUTPING_SOURCE") or JYUTPING_TABLE_PATH


def load_dictionary(source: str) -> BaseRomanizationLookup:
    """Build a lookup from a TSV path or the ``"pycantonese"`` backend."""
    if source == PYCANTONESE_SOURCE:
        logger.info("Loading Jyutping lookup from pycantonese")
        try:
            return PyCantoneseLookup()
        except ImportError as e:
            raise DictionaryLoadError(source, f"pycantonese is not installed ({e})") from e

    if not os.path.exists(source):
        raise DictionaryLoadError(source, "file not found")

    logger.info(f"Loading Jyutping dictionary from: {source}")
    dictionary = JyutpingDictionary.from_parser(LshkTableParser(source))
    if len(dictionary) == 0:
        raise DictionaryLoadError(source, "dictionary is empty after parsing")
    logger.info(f"Dictionary loaded: {len(dictionary)} characters")
    return dictionary


def init_dictionary(source: Optional[str] = None) -> BaseRomanizationLookup:
    """Load the shared dictionary once; later calls return the loaded instance."""
    global _dictionary
    with _lock:
        if _dictionary is None:
            _dictionary = load_dictionary(source or default_source())
        return _dictionary


def set_dictionary(dictionary: BaseRomanizationLookup) -> None:
    """Install an already-built lookup as the shared dictionary."""
    global _dictionary
    with _lock:
        _dictionary = dictionary


def get_dictionary() -> BaseRomanizationLookup:
    if _dictionary is None:
        raise DictionaryNotReadyError()
    return _dictionary


def is_dictionary_loaded() -> bool:
    return _dictionary is not None


def reset_dictionary() -> None:
    global _dictionary
    with _lock:
        _dictionary = None
