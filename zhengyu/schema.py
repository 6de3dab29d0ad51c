from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SegmentType(str, Enum):
    logograph = "LOGOGRAPH"
    phonetic = "PHONETIC"

class Engine(str, Enum):
    hybrid = "HYBRID"
    phonetic = "PHONETIC"
    text = "TEXT"

class Segment(BaseModel):
    text: str
    type: SegmentType
    surface: str                   # span of normalized input this segment covers
    reading: Optional[str] = None  # kana reading, LOGOGRAPH segments only
    source: Optional[str] = None   # jyutping source, PHONETIC segments only
    model_config = ConfigDict(frozen=True)

    @property
    def is_logograph(self) -> bool:
        return self.type is SegmentType.logograph

class ProcessLog(BaseModel):
    raw_input: str
    extraction: str
    normalized_text: str
    normalized_terms: List[str]
    segmentation: str
    jyutping: str
    kana: str
    model_config = ConfigDict(frozen=True)

class ConversionResult(BaseModel):
    original: str
    normalized_text: str
    preserved_terms: List[str] = Field(default_factory=list)
    text: str                      # display stream, logographs kept
    annotated_text: str            # display stream with <ruby> readings
    kana: str                      # flat phonetic stream
    jyutping: str                  # flat romanized stream
    segments: List[Segment] = Field(default_factory=list)
    engine: Engine
    source_error: Optional[str] = None
    process_log: Optional[ProcessLog] = None
    model_config = ConfigDict(frozen=True)

class PreserveAnalysis(BaseModel):
    terms: List[str] = Field(default_factory=list)
    particles: List[str] = Field(default_factory=list)
    model_config = ConfigDict(frozen=True)

class PreservedTerms(BaseModel):
    """Response schema for LLM keyword extraction."""
    keywords: List[str]
