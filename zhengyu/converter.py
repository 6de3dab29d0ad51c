"""Chinese text → Zhengyu conversion entrypoint."""

import json
import os
from typing import Dict, Optional

from dotenv import load_dotenv

from zhengyu.dictionary import get_dictionary
from zhengyu.logger import logger
from zhengyu.nlp.base import BasePreserveSource, BaseRomanizationLookup
from zhengyu.nlp.cantonese.normalizer import normalize_text
from zhengyu.nlp.cantonese.segmenter import CantoneseSegmenter, SegmentationOutput, prepare_terms
from zhengyu.schema import (
    ConversionResult,
    Engine,
    PreserveAnalysis,
    ProcessLog,
    Segment,
    SegmentType,
)

load_dotenv()

PRESERVE_SOURCE = os.getenv("ZHENGYU_PRESERVE_SOURCE", "lexicon") # none, lexicon, openai, gemini


class ZhengyuConverter:
    """Converts Chinese text to Zhengyu.

    Args:
        dictionary: Romanization lookup; ``None`` uses the process-wide
            dictionary, which must be initialised before converting.
        preserve_source: Source of the spans kept as logographs; ``None``
            selects one from ``ZHENGYU_PRESERVE_SOURCE``.
        variant_map: Optional character-variant table applied during
            normalization.
    """

    def __init__(self, dictionary: Optional[BaseRomanizationLookup] = None,
                 preserve_source: Optional[BasePreserveSource] = None,
                 variant_map: Optional[Dict[str, str]] = None):
        self._dictionary = dictionary
        self._preserve_source = preserve_source
        self.variant_map = variant_map

    @property
    def preserve_source(self) -> BasePreserveSource:
        """The configured source; the default is only built for hybrid conversion."""
        if self._preserve_source is None:
            from zhengyu.nlp import get_preserve_source
            logger.info(f"Using preserve source: {PRESERVE_SOURCE}")
            self._preserve_source = get_preserve_source(PRESERVE_SOURCE)
        return self._preserve_source

    @property
    def dictionary(self) -> BaseRomanizationLookup:
        """The lookup in use; raises DictionaryNotReadyError before initialisation."""
        return self._dictionary if self._dictionary is not None else get_dictionary()

    def convert(self, text: str) -> ConversionResult:
        """Hybrid conversion: preserved terms stay as logographs, the rest becomes kana."""
        segmenter = CantoneseSegmenter(self.dictionary)
        normalized_text = normalize_text(text, self.variant_map)

        analysis, source_error = self._analyze(text)
        terms = prepare_terms(analysis.terms, self.variant_map)
        particles = prepare_terms(analysis.particles, self.variant_map)

        out = segmenter.segment(normalized_text, terms, particles)

        if source_error:
            extraction = f"ERROR: {source_error}"
        else:
            extraction = json.dumps(
                {"preservedTerms": list(analysis.terms), "particles": list(analysis.particles)},
                ensure_ascii=False,
            )
        return self._build_result(text, normalized_text, terms, out, Engine.hybrid,
                                  extraction, source_error)

    def convert_phonetic(self, text: str) -> ConversionResult:
        """Pure phonetic conversion; only characters without a reading stay as logographs."""
        segmenter = CantoneseSegmenter(self.dictionary, keep_unknown=True)
        normalized_text = normalize_text(text, self.variant_map)
        out = segmenter.segment(normalized_text)
        return self._build_result(text, normalized_text, [], out, Engine.phonetic, "", None)

    def convert_text(self, text: str) -> ConversionResult:
        """Normalization only (character variants and punctuation); no phonetics."""
        normalized_text = normalize_text(text, self.variant_map)
        out = SegmentationOutput()
        if normalized_text:
            out.add(
                Segment(text=normalized_text, type=SegmentType.logograph, surface=normalized_text),
                normalized_text,
                "",
            )
        return self._build_result(text, normalized_text, [], out, Engine.text, "", None)

    def _analyze(self, text: str):
        """Run the preserve source; any failure degrades to an empty analysis."""
        try:
            analysis = self.preserve_source.analyze(text)
            if isinstance(analysis, (list, tuple)):
                analysis = PreserveAnalysis(terms=list(analysis))
            elif not isinstance(analysis, PreserveAnalysis):
                analysis = PreserveAnalysis.model_validate(analysis)
        except Exception as e:
            source = self._preserve_source.name if self._preserve_source is not None else PRESERVE_SOURCE
            logger.error(f"Preserve-term extraction via {source} failed: {e}")
            return PreserveAnalysis(), str(e) or type(e).__name__
        return analysis, None

    @staticmethod
    def _build_result(text, normalized_text, terms, out: SegmentationOutput,
                      engine: Engine, extraction: str,
                      source_error: Optional[str]) -> ConversionResult:
        jyutping = out.jyutping_text
        process_log = ProcessLog(
            raw_input=text,
            extraction=extraction,
            normalized_text=normalized_text,
            normalized_terms=list(terms),
            segmentation=out.text,
            jyutping=jyutping,
            kana=out.kana_text,
        )
        return ConversionResult(
            original=text,
            normalized_text=normalized_text,
            preserved_terms=list(terms),
            text=out.text,
            annotated_text=out.annotated_text,
            kana=out.kana_text,
            jyutping=jyutping,
            segments=out.segments,
            engine=engine,
            source_error=source_error,
            process_log=process_log,
        )


_default_converter: Optional[ZhengyuConverter] = None


def get_converter() -> ZhengyuConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = ZhengyuConverter()
    return _default_converter


def convert(text: str) -> ConversionResult:
    """Convert *text* with the default converter and the process-wide dictionary."""
    return get_converter().convert(text)
