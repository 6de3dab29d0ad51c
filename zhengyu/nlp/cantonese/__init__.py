"""Cantonese language processing module."""

from .jyutping import Syllable, Nucleus, CodaKind, parse_syllable
from .kana import syllable_to_kana, to_kana, to_kana_many
from .segmenter import CantoneseSegmenter, prepare_terms
from .preserve import NullPreserveSource, LexiconPreserveSource, LLMPreserveSource
from .tagger import TaggerPreserveSource

__all__ = [
    'Syllable',
    'Nucleus',
    'CodaKind',
    'parse_syllable',
    'syllable_to_kana',
    'to_kana',
    'to_kana_many',
    'CantoneseSegmenter',
    'prepare_terms',
    'NullPreserveSource',
    'LexiconPreserveSource',
    'LLMPreserveSource',
    'TaggerPreserveSource',
]
