"""Domain layer exports."""

from .highlighting import highlight
from .keywords import SUSPICIOUS_KEYWORDS, TRANSCRIPT_KEYWORDS
from .models import (
    AnalysisResult,
    RiskVerdict,
    TextSegment,
    TranscriptionJob,
    TranscriptionOutcome,
    TranscriptionRequest,
)
from .risk_classifier import (
    FixedScorePolicy,
    KeywordRiskClassifier,
    LinearScorePolicy,
    ScoringPolicy,
    build_text_classifier,
    build_transcript_classifier,
    find_evidence,
)
from .transcription_client import TranscriptionClient, TranscriptionState

__all__ = [
    "AnalysisResult",
    "RiskVerdict",
    "TextSegment",
    "TranscriptionJob",
    "TranscriptionOutcome",
    "TranscriptionRequest",
    "SUSPICIOUS_KEYWORDS",
    "TRANSCRIPT_KEYWORDS",
    "highlight",
    "find_evidence",
    "ScoringPolicy",
    "FixedScorePolicy",
    "LinearScorePolicy",
    "KeywordRiskClassifier",
    "build_text_classifier",
    "build_transcript_classifier",
    "TranscriptionClient",
    "TranscriptionState",
]
