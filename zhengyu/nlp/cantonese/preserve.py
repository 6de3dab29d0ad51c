"""Preserved-term sources: which spans stay as logographs."""

import json
import re
from typing import Iterable, List, Optional

from zhengyu.logger import logger
from zhengyu.nlp.base import BasePreserveSource, PreserveSourceError
from zhengyu.prompts import get_preserved_terms_prompt
from zhengyu.schema import PreserveAnalysis, PreservedTerms
from .lexicon import CORE_LEXICON, anchor_terms

_CODE_FENCE_RE = re.compile(r"```(?:json)?")
_QUOTED_RE = re.compile(r'"([^"]+)"')


def unique_terms(terms: Iterable[str]) -> List[str]:
    """Drop empty and repeated terms, keeping first-seen order."""
    seen = set()
    result = []
    for term in terms:
        if term and term not in seen:
            seen.add(term)
            result.append(term)
    return result


def parse_keywords_response(content: str, original_text: str) -> List[str]:
    """Extract keyword strings from an LLM reply.

    Accepts ``{"keywords": [...]}`` or a bare JSON list, with or without
    markdown fences. If the reply is not JSON, quoted strings are scraped.
    Only keywords that occur in *original_text* are kept.
    """
    content = _CODE_FENCE_RE.sub("", content or "").strip()

    try:
        parsed = json.loads(content)
    except json.JSONDecodeError:
        logger.warning(f"Keyword response is not valid JSON, scraping quoted strings: {content[:80]}")
        candidates = _QUOTED_RE.findall(content)
    else:
        if isinstance(parsed, dict) and isinstance(parsed.get("keywords"), list):
            candidates = parsed["keywords"]
        elif isinstance(parsed, list):
            candidates = parsed
        else:
            candidates = []

    return unique_terms(
        k for k in candidates if isinstance(k, str) and k in original_text
    )


class NullPreserveSource(BasePreserveSource):
    """Preserves nothing; every character is phoneticized."""

    def analyze(self, text: str) -> PreserveAnalysis:
        return PreserveAnalysis()


class LexiconPreserveSource(BasePreserveSource):
    """Rule-based source: anchor words of the core lexicon plus extra terms."""

    def __init__(self, extra_terms: Optional[Iterable[str]] = None, entries=CORE_LEXICON):
        self._terms = unique_terms(list(extra_terms or []) + anchor_terms(entries))

    @property
    def terms(self) -> List[str]:
        return list(self._terms)

    def analyze(self, text: str) -> PreserveAnalysis:
        found = [(text.find(term), term) for term in self._terms if term in text]
        found.sort(key=lambda pair: pair[0])
        return PreserveAnalysis(terms=[term for _, term in found])


class LLMPreserveSource(BasePreserveSource):
    """Asks a language model for the nouns, pronouns and numerals of the text."""

    def __init__(self, client=None, backend: Optional[str] = None):
        self._client = client
        self.backend = backend

    @property
    def client(self):
        """The completion client, created on first use (needs API credentials)."""
        if self._client is None:
            from zhengyu.ai import CompletionClient
            self._client = CompletionClient(backend=self.backend) if self.backend else CompletionClient()
        return self._client

    def analyze(self, text: str) -> PreserveAnalysis:
        if not text or not text.strip():
            return PreserveAnalysis()

        # client creation is inside the try: missing credentials surface here
        try:
            content = self.client.complete(
                get_preserved_terms_prompt(text), response_schema=PreservedTerms
            )
        except Exception as e:
            raise PreserveSourceError(f"AI keyword extraction failed: {e}") from e

        terms = parse_keywords_response(content, text)
        logger.info(f"AI extracted {len(terms)} preserved terms")
        return PreserveAnalysis(terms=terms)
