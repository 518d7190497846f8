"""Request and response models for the fraud-screener API."""

from pydantic import BaseModel

from domain.models import AnalysisResult, UserAction


class TextAnalysisRequest(BaseModel):
    """Typed text submitted for screening."""

    text: str


class ActionRequest(BaseModel):
    """A user decision on a previously returned analysis."""

    result: AnalysisResult
    action: UserAction


class ActionResponse(BaseModel):
    """Confirmation of a recorded user decision."""

    message: str
    result: AnalysisResult
