"""Screening endpoints for text, audio and video content."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile
from fraudshield_common.logging import setup_logging

from dependencies import get_analysis_handler
from domain import AnalysisResult
from domain.models import MediaKind
from exceptions import (
    ConfigurationError,
    EmptyInputError,
    InvalidMediaError,
    InvalidTextFileError,
    TranscriptionError,
    TranscriptionTimeoutError,
)
from handlers import AnalysisHandler
from response_models import ActionRequest, ActionResponse, TextAnalysisRequest

logger = setup_logging()

router = APIRouter(prefix="/analysis", tags=["analysis"])

HandlerDep = Annotated[AnalysisHandler, Depends(get_analysis_handler)]


@router.post("/text", response_model=AnalysisResult)
def analyze_text(body: TextAnalysisRequest, handler: HandlerDep) -> AnalysisResult:
    """Screens typed text for scam phrases."""
    try:
        return handler.analyze_text(body.text)
    except EmptyInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/text/file", response_model=AnalysisResult)
def analyze_text_file(file: UploadFile, handler: HandlerDep) -> AnalysisResult:
    """Screens the contents of an uploaded .txt or .csv file."""
    try:
        text = handler.load_text_file(
            file.filename or "", file.content_type, file.file.read()
        )
        return handler.analyze_text(text)
    except (InvalidTextFileError, EmptyInputError) as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/audio", response_model=AnalysisResult)
def analyze_audio(file: UploadFile, handler: HandlerDep) -> AnalysisResult:
    """Transcribes an audio file and screens the transcript."""
    return _analyze_media("audio", file, handler)


@router.post("/video", response_model=AnalysisResult)
def analyze_video(file: UploadFile, handler: HandlerDep) -> AnalysisResult:
    """Transcribes the audio track of a video file and screens the transcript."""
    return _analyze_media("video", file, handler)


@router.post("/action", response_model=ActionResponse)
def record_action(body: ActionRequest, handler: HandlerDep) -> ActionResponse:
    """Records a block, report or ignore decision on an analysis."""
    result, message = handler.apply_action(body.result, body.action)
    return ActionResponse(message=message, result=result)


def _analyze_media(
    media_kind: MediaKind, file: UploadFile, handler: AnalysisHandler
) -> AnalysisResult:
    file_name = file.filename or ""
    try:
        return handler.analyze_media(
            media_kind, file_name, file.content_type, file.file.read()
        )
    except InvalidMediaError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConfigurationError as e:
        logger.error("Transcription not configured", extra={"file_name": file_name})
        raise HTTPException(status_code=500, detail=str(e))
    except TranscriptionTimeoutError as e:
        logger.error(
            "Transcription timed out",
            extra={"file_name": file_name, "job_id": e.job_id},
        )
        raise HTTPException(status_code=504, detail=str(e))
    except TranscriptionError as e:
        logger.error(
            "Transcription failed",
            extra={"file_name": file_name, "error": str(e)},
        )
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception(
            "Error analyzing media",
            extra={"file_name": file_name, "media_kind": media_kind},
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e
