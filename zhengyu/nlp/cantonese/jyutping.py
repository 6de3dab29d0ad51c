"""Jyutping syllable parsing."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

# Two-letter initials are listed before their one-letter prefixes so the
# alternation always takes the longest initial.
INITIALS = ("gw", "kw", "ng", "b", "p", "m", "f", "d", "t", "n", "l",
            "g", "k", "h", "w", "z", "c", "s", "j")

JYUTPING_RE = re.compile(r"^(%s)?([a-z]+)([1-6])?\Z" % "|".join(INITIALS))
SYLLABIC_NASAL_RE = re.compile(r"^(m|ng)([1-6])?\Z")
NASAL_CODA_RE = re.compile(r"(ng|n|m)$")
STOP_CODA_RE = re.compile(r"(p|t|k)$")


class CodaKind(str, Enum):
    none = "none"
    nasal = "nasal"
    stop = "stop"

class Nucleus(str, Enum):
    """Every nucleus with its own kana composition rule."""
    aa = "aa"
    aai = "aai"
    aau = "aau"
    a = "a"
    ai = "ai"
    au = "au"
    e = "e"
    ei = "ei"
    i = "i"
    iu = "iu"
    o = "o"
    ou = "ou"
    oi = "oi"
    u = "u"
    ui = "ui"
    oe = "oe"
    oeng = "oeng"
    oek = "oek"
    eoi = "eoi"
    eo = "eo"
    yu = "yu"
    other = "other"

    @classmethod
    def of(cls, nucleus: str) -> "Nucleus":
        try:
            return cls(nucleus)
        except ValueError:
            return cls.other


@dataclass(frozen=True)
class Syllable:
    """A parsed jyutping token.

    ``initial`` is the initial used for kana lookup: a written ``ng-`` onset
    is folded into the zero initial ``""``. The onset as written is kept in
    ``written_initial``.
    """
    initial: str
    nucleus: str
    coda: str = ""
    tone: Optional[int] = None
    written_initial: str = ""
    syllabic_nasal: bool = False

    @property
    def coda_kind(self) -> CodaKind:
        if self.coda in ("m", "n", "ng"):
            return CodaKind.nasal
        if self.coda in ("p", "t", "k"):
            return CodaKind.stop
        return CodaKind.none

    @property
    def nucleus_kind(self) -> Nucleus:
        return Nucleus.of(self.nucleus)


def parse_syllable(token: str) -> Optional[Syllable]:
    """Parse *token* as ``initial? nucleus coda? tone?``.

    Returns ``None`` when the token is not jyutping (kana, symbols, upper
    case, mixed scripts); callers echo such tokens unchanged.
    """
    if not token:
        return None

    nasal = SYLLABIC_NASAL_RE.match(token)
    if nasal:
        tone = nasal.group(2)
        return Syllable(
            initial="",
            nucleus=nasal.group(1),
            tone=int(tone) if tone else None,
            written_initial="",
            syllabic_nasal=True,
        )

    match = JYUTPING_RE.match(token)
    if not match:
        return None

    written_initial, final, tone = match.group(1) or "", match.group(2), match.group(3)
    initial = "" if written_initial == "ng" else written_initial

    nucleus, coda = final, ""
    coda_match = NASAL_CODA_RE.search(final) or STOP_CODA_RE.search(final)
    if coda_match:
        coda = coda_match.group(1)
        nucleus = final[:coda_match.start()]

    return Syllable(
        initial=initial,
        nucleus=nucleus,
        coda=coda,
        tone=int(tone) if tone else None,
        written_initial=written_initial,
    )


def split_syllables(jyutping: str) -> List[str]:
    """Split a run of tone-marked syllables such as ``"uk1kei2"`` or ``"uk1 kei2"``."""
    return re.findall(r"[a-z]+[1-6]?", jyutping)
