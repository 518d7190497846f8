"""Domain models for media transcription and risk screening."""

from typing import Literal

from pydantic import BaseModel, computed_field

MediaKind = Literal["audio", "video"]
Channel = Literal["text", "audio", "video"]
UserAction = Literal["block", "report", "ignore"]
RiskLabel = Literal["FRAUD", "UNCERTAIN"]
RecommendedAction = Literal["BLOCK", "REVIEW"]
RiskLevel = Literal["low", "medium", "high"]

JOB_STATUS_COMPLETED = "completed"
JOB_STATUS_ERROR = "error"


class TranscriptionRequest(BaseModel, frozen=True):
    """A single media item submitted for transcription."""

    data: bytes
    mime_type: str
    filename: str
    media_kind: MediaKind


class TranscriptionJob(BaseModel, frozen=True):
    """
    Provider-side handle of a transcription in progress.

    Status strings are defined by the provider (queued, processing,
    completed, error). Only completed and error are terminal.
    """

    id: str
    status: str = ""
    text: str | None = None
    error: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == JOB_STATUS_COMPLETED

    @property
    def is_failed(self) -> bool:
        return self.status == JOB_STATUS_ERROR


class TranscriptionOutcome(BaseModel, frozen=True):
    """Transcript of a completed job, echoed with the request metadata."""

    text: str
    filename: str
    mime_type: str
    media_kind: MediaKind


class RiskVerdict(BaseModel, frozen=True):
    """
    Output of keyword risk classification.

    The action field stays None until the user decides; use
    model_copy(update={"action": ...}) to record the decision.
    """

    label: RiskLabel
    score: int
    evidence: list[str]
    explanation: str
    recommended_action: RecommendedAction
    action: UserAction | None = None


class TextSegment(BaseModel, frozen=True):
    """A run of text, either plain or matching a keyword."""

    text: str
    highlighted: bool = False


class AnalysisResult(BaseModel, frozen=True):
    """Result of analyzing one submission, ready for presentation."""

    channel: Channel
    verdict: RiskVerdict
    explanation: str
    transcript: str | None = None
    highlights: list[TextSegment] = []

    @computed_field
    @property
    def risk_level(self) -> RiskLevel:
        if self.verdict.score >= 70:
            return "high"
        if self.verdict.score >= 40:
            return "medium"
        return "low"
