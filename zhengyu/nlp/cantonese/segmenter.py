"""Zhengyu segmentation: logograph anchors vs. kana spans."""

import html
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from zhengyu.nlp.base import BaseRomanizationLookup
from zhengyu.schema import Segment, SegmentType
from .kana import to_kana, to_kana_many
from .normalizer import is_ascii_alnum, is_punctuation_or_space, normalize_text
from .preserve import unique_terms


def prepare_terms(terms: Iterable[str], variant_map: Optional[Dict[str, str]] = None) -> List[str]:
    """Normalize, deduplicate and sort terms longest first.

    The sort is stable, so equally long terms keep their incoming order.
    """
    normalized = unique_terms(normalize_text(term, variant_map) for term in terms)
    return sorted(normalized, key=len, reverse=True)


def render_annotated(segments: Iterable[Segment]) -> str:
    """Display text as HTML, readings attached as ``<ruby>`` annotations.

    Every segment's text is escaped, so markup in the input stays literal.
    """
    parts = []
    for segment in segments:
        text = html.escape(segment.text)
        if segment.is_logograph and segment.reading:
            parts.append(f"<ruby>{text}<rt>{html.escape(segment.reading)}</rt></ruby>")
        else:
            parts.append(text)
    return "".join(parts)


@dataclass
class SegmentationOutput:
    """Per-call buffers for the three output streams."""
    segments: List[Segment] = field(default_factory=list)
    display: List[str] = field(default_factory=list)
    kana: List[str] = field(default_factory=list)
    jyutping: List[str] = field(default_factory=list)

    def add(self, segment: Segment, kana: str, jyutping: str) -> None:
        self.segments.append(segment)
        self.display.append(segment.text)
        self.kana.append(kana)
        self.jyutping.append(jyutping)

    @property
    def text(self) -> str:
        return "".join(self.display)

    @property
    def kana_text(self) -> str:
        return "".join(self.kana)

    @property
    def jyutping_text(self) -> str:
        return "".join(self.jyutping).strip()

    @property
    def annotated_text(self) -> str:
        return render_annotated(self.segments)


class CantoneseSegmenter:
    """Walks normalized text and decides, per span, logograph or kana.

    At each position, in order:
      1. longest preserved term  -> LOGOGRAPH with a kana reading
      2. longest particle term   -> one PHONETIC segment
      3. ASCII letters/digits    -> LOGOGRAPH, verbatim, no reading
      4. whitespace/punctuation  -> literal, unchanged in every stream
      5. anything else           -> PHONETIC via jyutping lookup
    """

    def __init__(self, lookup: BaseRomanizationLookup, keep_unknown: bool = False):
        self.lookup = lookup
        # keep_unknown: characters without a reading stay as logographs
        self.keep_unknown = keep_unknown

    def segment(self, text: str, preserved_terms: Iterable[str] = (),
                particles: Iterable[str] = ()) -> SegmentationOutput:
        """Segment already-normalized *text*.

        *preserved_terms* and *particles* must be normalized the same way as
        the text and sorted longest first (see :func:`prepare_terms`).
        """
        preserved_terms = list(preserved_terms)
        particles = list(particles)
        out = SegmentationOutput()

        i = 0
        n = len(text)
        while i < n:
            term = self._match(text, i, preserved_terms)
            if term:
                self._emit_preserved(out, term)
                i += len(term)
                continue

            particle = self._match(text, i, particles)
            if particle:
                self._emit_particle(out, particle)
                i += len(particle)
                continue

            char = text[i]

            if is_ascii_alnum(char):
                j = i + 1
                while j < n and is_ascii_alnum(text[j]):
                    j += 1
                run = text[i:j]
                out.add(Segment(text=run, type=SegmentType.logograph, surface=run), run, run)
                i = j
                continue

            if is_punctuation_or_space(char):
                out.add(Segment(text=char, type=SegmentType.phonetic, surface=char), char, char + " ")
                i += 1
                continue

            self._emit_character(out, char)
            i += 1

        return out

    @staticmethod
    def _match(text: str, pos: int, terms: List[str]) -> Optional[str]:
        for term in terms:
            if text.startswith(term, pos):
                return term
        return None

    def _emit_preserved(self, out: SegmentationOutput, term: str) -> None:
        if term.isascii():
            # Latin words tagged as nouns stay verbatim without a reading
            out.add(Segment(text=term, type=SegmentType.logograph, surface=term), term, term + " ")
            return

        jyutping = self.lookup.lookup_many(term)
        reading = to_kana_many(jyutping)
        out.add(
            Segment(text=term, type=SegmentType.logograph, surface=term, reading=reading),
            reading,
            " ".join(jyutping) + " ",
        )

    def _emit_particle(self, out: SegmentationOutput, particle: str) -> None:
        jyutping = self.lookup.lookup_many(particle)
        kana = to_kana_many(jyutping)
        source = " ".join(jyutping)
        out.add(
            Segment(text=kana, type=SegmentType.phonetic, surface=particle, source=source),
            kana,
            source + " ",
        )

    def _emit_character(self, out: SegmentationOutput, char: str) -> None:
        jyutping = self.lookup.lookup(char)
        if self.keep_unknown and jyutping == char:
            out.add(Segment(text=char, type=SegmentType.logograph, surface=char), char, char + " ")
            return

        kana = to_kana(jyutping)
        out.add(
            Segment(text=kana, type=SegmentType.phonetic, surface=char, source=jyutping),
            kana,
            jyutping + " ",
        )
