"""Shared configuration models for external providers."""

from pydantic import BaseModel


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI REST API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com/v2"
    request_timeout_seconds: float = 60.0


class PollingConfig(BaseModel, frozen=True):
    """Client-side polling schedule for asynchronous transcription jobs."""

    interval_seconds: float = 3.0
    timeout_seconds: float = 300.0
