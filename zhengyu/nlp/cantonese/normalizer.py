"""Cantonese text normalization utilities."""

import unicodedata
from typing import Dict, Optional

# Chinese / ASCII punctuation -> Japanese style
PUNCTUATION_MAP = {
    ",": "、",
    "，": "、",
    "“": "「",
    "”": "」",
    "‘": "『",
    "’": "』",
    "(": "（",
    ")": "）",
    "!": "！",
    "?": "？",
    ":": "：",
    ";": "；",
}

_PUNCTUATION_TABLE = str.maketrans(PUNCTUATION_MAP)


def normalize_punctuation(text: str) -> str:
    """Replace Chinese and ASCII punctuation with its Japanese counterpart.

    Args:
        text: The text to normalize

    Returns:
        Text with punctuation mapped (，→、 “→「 ”→」 ...)
    """
    return text.translate(_PUNCTUATION_TABLE)


def convert_variants(text: str, variant_map: Optional[Dict[str, str]] = None) -> str:
    """Replace each character that has an entry in *variant_map*.

    The map is supplied by the caller (e.g. a Hanzi → Shinjitai table);
    without one the text is returned unchanged.
    """
    if not variant_map:
        return text
    return "".join(variant_map.get(char, char) for char in text)


def normalize_text(text: str, variant_map: Optional[Dict[str, str]] = None) -> str:
    """Variant conversion followed by punctuation mapping."""
    return normalize_punctuation(convert_variants(text, variant_map))


def is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_punctuation_or_space(char: str) -> bool:
    """Whitespace or any Unicode punctuation (category P*)."""
    return char.isspace() or unicodedata.category(char).startswith("P")
