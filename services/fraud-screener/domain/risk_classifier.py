"""Keyword-evidence risk classification."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from fraudshield_common.logging import setup_logging

from .keywords import SUSPICIOUS_KEYWORDS, TRANSCRIPT_KEYWORDS
from .models import RiskVerdict

logger = setup_logging()

TRANSCRIPT_ANALYZED = "Transcript analyzed. Risk derived from scam keyword presence."
NO_TRANSCRIPT = "No transcript text returned."


def find_evidence(text: str | None, keywords: Sequence[str]) -> list[str]:
    """
    Returns the keywords found in the text as case-insensitive substrings.

    Matches keep the order of the keyword list, not the order in which
    they appear in the text.
    """
    lowered = (text or "").lower()
    return [k for k in keywords if k and k.lower() in lowered]


class ScoringPolicy(ABC):
    """Turns a list of evidence terms into a score and explanation."""

    @abstractmethod
    def score(self, evidence: list[str]) -> int:
        """Returns the risk score for the given evidence."""

    @abstractmethod
    def explain(self, text: str, evidence: list[str]) -> str:
        """Returns a human-readable explanation of the score."""


class FixedScorePolicy(ScoringPolicy):
    """Any evidence at all yields the same flagged score."""

    def __init__(self, flagged_score: int = 90):
        self._flagged_score = flagged_score

    def score(self, evidence: list[str]) -> int:
        return self._flagged_score if evidence else 0

    def explain(self, text: str, evidence: list[str]) -> str:
        if not evidence:
            return ""
        return f"Contains {', '.join(evidence)}"


class LinearScorePolicy(ScoringPolicy):
    """Score grows with the number of hits, starting from a floor."""

    def __init__(self, per_hit: int = 20, floor: int = 40, ceiling: int = 100):
        self._per_hit = per_hit
        self._floor = floor
        self._ceiling = ceiling

    def score(self, evidence: list[str]) -> int:
        if not evidence:
            return 0
        return min(self._ceiling, len(evidence) * self._per_hit + self._floor)

    def explain(self, text: str, evidence: list[str]) -> str:
        return TRANSCRIPT_ANALYZED if text else NO_TRANSCRIPT


class KeywordRiskClassifier:
    """Classifies text by scanning it for a fixed list of scam phrases."""

    def __init__(
        self, keywords: Sequence[str], policy: ScoringPolicy, name: str = "keyword"
    ):
        self._keywords = tuple(keywords)
        self._policy = policy
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    def classify(self, text: str | None) -> RiskVerdict:
        """
        Produces a verdict for the given text.

        Never raises: empty or missing text yields an UNCERTAIN verdict
        with no evidence.

        Args:
            text: User-typed text or a transcript.

        Returns:
            RiskVerdict with score, evidence and explanation.
        """
        text = text or ""
        evidence = find_evidence(text, self._keywords)
        flagged = bool(evidence)

        verdict = RiskVerdict(
            label="FRAUD" if flagged else "UNCERTAIN",
            score=self._policy.score(evidence),
            evidence=evidence,
            explanation=self._policy.explain(text, evidence),
            recommended_action="BLOCK" if flagged else "REVIEW",
        )

        logger.info(
            "Content classified",
            extra={
                "classifier": self._name,
                "label": verdict.label,
                "score": verdict.score,
                "evidence_count": len(evidence),
            },
        )
        return verdict


def build_text_classifier() -> KeywordRiskClassifier:
    """Returns the evidence-only classifier used for typed text."""
    return KeywordRiskClassifier(SUSPICIOUS_KEYWORDS, FixedScorePolicy(), name="text")


def build_transcript_classifier() -> KeywordRiskClassifier:
    """Returns the hit-count classifier used for media transcripts."""
    return KeywordRiskClassifier(
        TRANSCRIPT_KEYWORDS, LinearScorePolicy(), name="transcript"
    )
