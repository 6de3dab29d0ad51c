"""Preserved-term extraction from part-of-speech tagger output (CTB tagset)."""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, List

from zhengyu.logger import logger
from zhengyu.nlp.base import BasePreserveSource, PreserveSourceError
from zhengyu.schema import PreserveAnalysis

MAX_CHUNK_SIZE = 700
MAX_TOTAL_SIZE = 3500

# CTB tags kept as logographs: nouns, pronouns, numerals/measure words
PRESERVED_POS_TAGS = ("NN", "NR", "NT", "PN", "CD", "OD", "M")
# Sentence-final and aspect particles
PARTICLE_POS_TAGS = ("SP", "AS", "MSP")

_SENTENCE_ENDERS = re.compile(r"[。！？.!?]")
_CLAUSE_ENDERS = re.compile(r"[，、；,;]")
_BRAT_LINE_RE = re.compile(r"^T\d+\s+(\S+)\s+\d+\s+\d+\s+(.+)$")


@dataclass
class TaggedText:
    """Tokens and tags, one list per sentence."""
    tok: List[List[str]] = field(default_factory=list)
    pos: List[List[str]] = field(default_factory=list)


def _last_boundary(pattern: re.Pattern, window: str) -> int:
    boundary = -1
    for match in pattern.finditer(window):
        boundary = match.end()
    return boundary


def split_text_into_chunks(text: str, max_size: int = MAX_CHUNK_SIZE) -> List[str]:
    """Split *text* into pieces of at most *max_size* characters.

    Prefers the last sentence ender inside the window, then the last clause
    mark; a boundary in the first 30% of the window is ignored and the window
    is cut hard.
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")
    if not text:
        return []
    if len(text) <= max_size:
        return [text]

    chunks: List[str] = []
    remaining = text
    while remaining:
        if len(remaining) <= max_size:
            chunks.append(remaining)
            break

        window = remaining[:max_size]
        boundary = _last_boundary(_SENTENCE_ENDERS, window)
        if boundary == -1 or boundary < max_size * 0.3:
            boundary = _last_boundary(_CLAUSE_ENDERS, window)
        if boundary == -1 or boundary < max_size * 0.3:
            boundary = max_size

        chunks.append(remaining[:boundary])
        remaining = remaining[boundary:]

    return chunks


def parse_tagger_response(data: Any) -> TaggedText:
    """Accept either ``{"tok": [...], "pos": [...]}`` or a list of BRAT documents.

    A BRAT line looks like ``T1 NR 0 2 南武``.
    """
    result = TaggedText()

    if isinstance(data, list):
        for document in data:
            if not isinstance(document, str):
                continue
            tokens: List[str] = []
            tags: List[str] = []
            for line in document.split("\n"):
                match = _BRAT_LINE_RE.match(line)
                if match:
                    tags.append(match.group(1))
                    tokens.append(match.group(2))
            if tokens:
                result.tok.append(tokens)
                result.pos.append(tags)
    elif isinstance(data, dict) and data.get("tok") and data.get("pos"):
        result.tok = list(data["tok"])
        result.pos = list(data["pos"])

    return result


def merge_tagged(results: List[TaggedText]) -> TaggedText:
    merged = TaggedText()
    for result in results:
        merged.tok.extend(result.tok)
        merged.pos.extend(result.pos)
    return merged


def _tagged_pairs(tagged: TaggedText):
    for tokens, tags in zip(tagged.tok, tagged.pos):
        yield from zip(tokens, tags)


def extract_preserved_terms(tagged: TaggedText) -> List[str]:
    preserved: List[str] = []
    for token, tag in _tagged_pairs(tagged):
        if tag in PRESERVED_POS_TAGS and token not in preserved:
            preserved.append(token)
    return preserved


def extract_particles(tagged: TaggedText) -> List[str]:
    particles: List[str] = []
    for token, tag in _tagged_pairs(tagged):
        if tag in PARTICLE_POS_TAGS and token not in particles:
            particles.append(token)
    return particles


class TaggerPreserveSource(BasePreserveSource):
    """Preserve source driven by an external POS tagger.

    ``tag_fn`` takes a chunk of text and returns the tagger's raw response
    (see :func:`parse_tagger_response`). Rate limiting and caching of the
    tagger calls belong to ``tag_fn``.
    """

    def __init__(self, tag_fn: Callable[[str], Any],
                 max_chunk_size: int = MAX_CHUNK_SIZE,
                 max_total_size: int = MAX_TOTAL_SIZE):
        if max_chunk_size <= 0:
            raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")
        self.tag_fn = tag_fn
        self.max_chunk_size = max_chunk_size
        self.max_total_size = max_total_size

    def tag(self, text: str) -> TaggedText:
        text = text.strip()
        if not text:
            return TaggedText()
        if len(text) > self.max_total_size:
            raise PreserveSourceError(
                f"Text too long: {len(text)} chars (max {self.max_total_size})"
            )

        chunks = split_text_into_chunks(text, self.max_chunk_size)
        logger.info(f"Tagging {len(chunks)} chunk(s), total {len(text)} chars")

        results = []
        for chunk in chunks:
            try:
                raw = self.tag_fn(chunk)
            except Exception as e:
                raise PreserveSourceError(f"POS tagger failed: {e}") from e
            results.append(parse_tagger_response(raw))
        return merge_tagged(results)

    def analyze(self, text: str) -> PreserveAnalysis:
        tagged = self.tag(text)
        return PreserveAnalysis(
            terms=extract_preserved_terms(tagged),
            particles=extract_particles(tagged),
        )
