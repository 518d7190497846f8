"""AssemblyAI REST implementation of the TranscriptionProvider interface."""

from typing import Any

import requests
from fraudshield_common import AssemblyAIConfig
from fraudshield_common.logging import setup_logging
from pydantic import ValidationError

from config import API_KEY_ENV
from domain.models import TranscriptionJob
from exceptions import ConfigurationError, JobCreationError, PollError, UploadError

from .interfaces import TranscriptionProvider

logger = setup_logging()


def _error_text(response: requests.Response, default: str) -> str:
    """Returns the provider's error body, or a default when it is empty."""
    return response.text.strip() or default


def _json_body(response: requests.Response) -> dict[str, Any]:
    """Parses a JSON object body; anything else counts as an empty body."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class AssemblyAIProvider(TranscriptionProvider):
    """Talks to the AssemblyAI upload and transcription endpoints."""

    def __init__(self, session: requests.Session, config: AssemblyAIConfig):
        self._session = session
        self._config = config

    def check_credentials(self) -> None:
        if not self._config.api_key:
            logger.error("AssemblyAI API key missing", extra={"setting": API_KEY_ENV})
            raise ConfigurationError(API_KEY_ENV)

    def upload(self, data: bytes) -> str:
        try:
            response = self._session.post(
                self._url("/upload"),
                headers={
                    "authorization": self._config.api_key,
                    "Content-Type": "application/octet-stream",
                },
                data=data,
                timeout=self._config.request_timeout_seconds,
            )
        except requests.RequestException as e:
            logger.exception("AssemblyAI upload request failed")
            raise UploadError(str(e), e) from e

        if not response.ok:
            logger.error(
                "AssemblyAI upload rejected",
                extra={"status_code": response.status_code},
            )
            raise UploadError(_error_text(response, "Upload failed"))

        upload_url = _json_body(response).get("upload_url")
        if not isinstance(upload_url, str) or not upload_url:
            raise UploadError("missing upload_url")

        logger.info("Media uploaded to AssemblyAI", extra={"size_bytes": len(data)})
        return upload_url

    def create_job(self, upload_url: str) -> TranscriptionJob:
        try:
            response = self._session.post(
                self._url("/transcribe"),
                headers={"authorization": self._config.api_key},
                json={"audio_url": upload_url},
                timeout=self._config.request_timeout_seconds,
            )
        except requests.RequestException as e:
            logger.exception("AssemblyAI job creation request failed")
            raise JobCreationError(str(e), e) from e

        if not response.ok:
            logger.error(
                "AssemblyAI job creation rejected",
                extra={"status_code": response.status_code},
            )
            raise JobCreationError(_error_text(response, "Create job failed"))

        body = _json_body(response)
        if not body.get("id"):
            raise JobCreationError("missing job id")

        try:
            job = self._to_job(body["id"], body)
        except ValidationError as e:
            logger.exception("AssemblyAI job response malformed")
            raise JobCreationError("malformed job response", e) from e

        logger.info(
            "Transcription job created",
            extra={"job_id": job.id, "status": job.status},
        )
        return job

    def get_job(self, job_id: str) -> TranscriptionJob:
        try:
            response = self._session.get(
                self._url(f"/transcribe/{job_id}"),
                headers={"authorization": self._config.api_key},
                timeout=self._config.request_timeout_seconds,
            )
        except requests.RequestException as e:
            logger.exception("AssemblyAI poll request failed", extra={"job_id": job_id})
            raise PollError(job_id, str(e), e) from e

        if not response.ok:
            logger.error(
                "AssemblyAI poll rejected",
                extra={"job_id": job_id, "status_code": response.status_code},
            )
            raise PollError(job_id, _error_text(response, "Poll failed"))

        try:
            return self._to_job(job_id, _json_body(response))
        except ValidationError as e:
            logger.exception("AssemblyAI poll response malformed", extra={"job_id": job_id})
            raise PollError(job_id, "malformed status response", e) from e

    def _url(self, path: str) -> str:
        return self._config.base_url.rstrip("/") + path

    @staticmethod
    def _to_job(job_id: str, body: dict[str, Any]) -> TranscriptionJob:
        return TranscriptionJob(
            id=str(job_id),
            status=str(body.get("status") or ""),
            text=body.get("text"),
            error=body.get("error"),
        )
