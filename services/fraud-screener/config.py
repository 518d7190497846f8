"""Application configuration loaded from environment variables."""

import os

from fraudshield_common import AssemblyAIConfig, PollingConfig
from pydantic import BaseModel

API_KEY_ENV = "ASSEMBLYAI_API_KEY"


class AnalysisConfig(BaseModel, frozen=True):
    """Limits applied to user-submitted content."""

    text_file_max_chars: int = 5000


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    polling: PollingConfig = PollingConfig()
    analysis: AnalysisConfig = AnalysisConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv(API_KEY_ENV, ""),
            base_url=os.getenv(
                "ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"
            ),
            request_timeout_seconds=float(
                os.getenv("ASSEMBLYAI_REQUEST_TIMEOUT_SECONDS", "60")
            ),
        ),
        polling=PollingConfig(
            interval_seconds=float(
                os.getenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", "3")
            ),
            timeout_seconds=float(os.getenv("TRANSCRIPTION_TIMEOUT_SECONDS", "300")),
        ),
        analysis=AnalysisConfig(
            text_file_max_chars=int(os.getenv("TEXT_FILE_MAX_CHARS", "5000")),
        ),
    )
