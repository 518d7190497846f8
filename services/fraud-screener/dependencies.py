"""Dependency injection configuration for the fraud-screener service."""

import requests
from fraudshield_common import setup_logging

from config import load_config
from domain import (
    TranscriptionClient,
    build_text_classifier,
    build_transcript_classifier,
)
from handlers import AnalysisHandler
from infrastructure import AssemblyAIProvider

logger = setup_logging()

_config = load_config()

# AssemblyAI setup
_http_session = requests.Session()
_provider = AssemblyAIProvider(_http_session, _config.assemblyai)
_transcription_client = TranscriptionClient(_provider, _config.polling)

if not _config.assemblyai.api_key:
    logger.warning("ASSEMBLYAI_API_KEY not set, media analysis will fail")

_handler = AnalysisHandler(
    _transcription_client,
    build_text_classifier(),
    build_transcript_classifier(),
    text_file_max_chars=_config.analysis.text_file_max_chars,
)


def get_transcription_client() -> TranscriptionClient:
    """Returns the configured transcription client."""
    return _transcription_client


def get_analysis_handler() -> AnalysisHandler:
    """Returns the configured analysis handler."""
    return _handler
