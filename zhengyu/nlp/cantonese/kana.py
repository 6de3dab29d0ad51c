"""Zhengyu kana mapping for parsed jyutping syllables."""

from typing import Dict, Iterable, Tuple

from .jyutping import CodaKind, Nucleus, Syllable, parse_syllable

# ──────────────────────────────────────────────────────────────────────────────
# TABLES
# ──────────────────────────────────────────────────────────────────────────────
VOWELS = ("a", "i", "u", "e", "o")

# One a/i/u/e/o row per initial.
KANA_ROWS: Dict[str, Tuple[str, str, str, str, str]] = {
    "":   ("あ", "い", "う", "え", "お"),
    "b":  ("ば", "び", "ぶ", "べ", "ぼ"),
    "p":  ("ぱ", "ぴ", "ぷ", "ぺ", "ぽ"),
    "m":  ("ま", "み", "む", "め", "も"),
    "f":  ("ふぁ", "ふぃ", "ふ", "ふぇ", "ふぉ"),  # small-vowel glides
    "d":  ("だ", "ぢ", "づ", "で", "ど"),
    "t":  ("た", "ち", "つ", "て", "と"),
    "n":  ("な", "に", "ぬ", "ね", "の"),
    "l":  ("ら", "り", "る", "れ", "ろ"),
    "g":  ("が", "ぎ", "ぐ", "げ", "ご"),
    "k":  ("か", "き", "く", "け", "こ"),
    "gw": ("ぐわ", "ぐい", "ぐ", "ぐえ", "ぐを"),
    "kw": ("くわ", "くい", "く", "くえ", "くを"),
    "w":  ("わ", "うぃ", "う", "うぇ", "を"),
    "h":  ("は", "ひ", "ふ", "へ", "ほ"),
    "z":  ("ざ", "じ", "ず", "ぜ", "ぞ"),
    "c":  ("つぁ", "つぃ", "つ", "つぇ", "つぉ"),  # never palatalizes
    "s":  ("さ", "し", "す", "せ", "そ"),
    "j":  ("や", "い", "ゆ", "いぇ", "よ"),
}

NASAL_CODA = "ん"
STOP_CODA = "っ"
SYLLABIC_NASAL = "ん"
LONG_A = "あ"
SMALL_YU = "ゅ"
GLIDE_YU = "ゆ"
C_YU = "つゆ"

CODA_KANA = {
    CodaKind.none: "",
    CodaKind.nasal: NASAL_CODA,
    CodaKind.stop: STOP_CODA,
}

# nucleus -> (row vowel, fixed suffix)
# Long aa keeps its length mark whether or not a coda follows: baa -> ばあ,
# baan -> ばあん, ban -> ばん.
NUCLEUS_RULES: Dict[Nucleus, Tuple[str, str]] = {
    Nucleus.aa:   ("a", LONG_A),
    Nucleus.aai:  ("a", "あい"),
    Nucleus.aau:  ("a", "あう"),
    Nucleus.a:    ("a", ""),
    Nucleus.ai:   ("a", "い"),
    Nucleus.au:   ("a", "う"),
    Nucleus.e:    ("e", ""),
    Nucleus.ei:   ("e", "い"),
    Nucleus.i:    ("i", ""),
    Nucleus.iu:   ("i", "う"),
    Nucleus.o:    ("o", ""),
    Nucleus.ou:   ("o", "う"),
    Nucleus.oi:   ("o", "い"),
    Nucleus.u:    ("u", ""),
    Nucleus.ui:   ("u", "い"),
    Nucleus.oe:   ("o", "え"),
    Nucleus.oeng: ("o", "えん"),
    Nucleus.oek:  ("o", "えっ"),
    Nucleus.eoi:  ("e", "おい"),
    Nucleus.eo:   ("e", "お"),
}


def row_kana(initial: str, vowel: str) -> str:
    """Kana for *initial* + short *vowel*; unknown initials use the zero row."""
    if vowel not in VOWELS:
        return ""
    row = KANA_ROWS.get(initial, KANA_ROWS[""])
    return row[VOWELS.index(vowel)]


def _yu_kana(initial: str) -> str:
    if initial in ("", "j"):
        return GLIDE_YU
    if initial == "c":
        return C_YU
    # yoon contraction: i-column + small yu (syu -> しゅ, kyu -> きゅ)
    return row_kana(initial, "i") + SMALL_YU


def nucleus_kana(syllable: Syllable) -> str:
    kind = syllable.nucleus_kind
    if kind is Nucleus.yu:
        return _yu_kana(syllable.initial)
    if kind is Nucleus.other:
        return row_kana(syllable.initial, "a") or syllable.nucleus
    vowel, suffix = NUCLEUS_RULES[kind]
    return row_kana(syllable.initial, vowel) + suffix


def syllable_to_kana(syllable: Syllable) -> str:
    """Map a parsed syllable to kana. Tone is ignored."""
    if syllable.syllabic_nasal:
        return SYLLABIC_NASAL
    return nucleus_kana(syllable) + CODA_KANA[syllable.coda_kind]


def to_kana(token: str) -> str:
    """Map one jyutping token to kana, echoing anything that is not jyutping."""
    syllable = parse_syllable(token)
    if syllable is None:
        return token
    return syllable_to_kana(syllable)


def to_kana_many(tokens: Iterable[str]) -> str:
    return "".join(to_kana(token) for token in tokens)