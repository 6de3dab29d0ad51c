"""Natural Language Processing module for zhengyu

This module provides the Cantonese processing pipeline: jyutping parsing,
kana mapping, segmentation and the pluggable preserved-term sources.
"""

from .base import (
    BasePreserveSource,
    BaseRomanizationLookup,
    DictionaryLoadError,
    DictionaryNotReadyError,
    PreserveSourceError,
    ZhengyuError,
)

PRESERVE_SOURCES = ('none', 'lexicon', 'openai', 'gemini', 'tagger')

def get_preserve_source(name: str, **kwargs) -> BasePreserveSource:
    """Get a preserved-term source by name.

    Args:
        name: 'none', 'lexicon', 'openai', 'gemini' or 'tagger'
        **kwargs: Passed to the source (e.g. ``extra_terms`` for 'lexicon',
            ``client`` for the AI sources, ``tag_fn`` for 'tagger')

    Returns:
        Preserve source instance

    Raises:
        ValueError: If the source is not supported
    """
    name = name.lower()

    if name == 'none':
        from .cantonese.preserve import NullPreserveSource
        return NullPreserveSource()
    elif name == 'lexicon':
        from .cantonese.preserve import LexiconPreserveSource
        return LexiconPreserveSource(**kwargs)
    elif name in ['openai', 'gemini']:
        from .cantonese.preserve import LLMPreserveSource
        return LLMPreserveSource(backend=name, **kwargs)
    elif name == 'tagger':
        from .cantonese.tagger import TaggerPreserveSource
        if 'tag_fn' not in kwargs:
            raise ValueError("The 'tagger' preserve source requires a tag_fn")
        return TaggerPreserveSource(**kwargs)
    else:
        raise ValueError(f"Unsupported preserve source: {name}")

__all__ = [
    'BasePreserveSource',
    'BaseRomanizationLookup',
    'DictionaryLoadError',
    'DictionaryNotReadyError',
    'PreserveSourceError',
    'ZhengyuError',
    'PRESERVE_SOURCES',
    'get_preserve_source',
]
