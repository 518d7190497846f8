"""Upload, submit and poll workflow for media transcription."""

import time
from collections.abc import Callable
from enum import Enum

from fraudshield_common import PollingConfig
from fraudshield_common.logging import setup_logging
from pydantic import BaseModel

from exceptions import TranscriptionFailedError, TranscriptionTimeoutError
from infrastructure.interfaces import TranscriptionProvider

from .models import TranscriptionJob, TranscriptionOutcome, TranscriptionRequest

logger = setup_logging()


class TranscriptionState(str, Enum):
    """Stages of a single transcription run."""

    UPLOADING = "uploading"
    JOB_CREATED = "job_created"
    POLLING = "polling"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self) -> bool:
        return self in (
            TranscriptionState.COMPLETED,
            TranscriptionState.FAILED,
            TranscriptionState.TIMED_OUT,
        )


class TranscriptionRun(BaseModel):
    """Mutable progress of one request through the state machine."""

    request: TranscriptionRequest
    state: TranscriptionState = TranscriptionState.UPLOADING
    upload_url: str | None = None
    job: TranscriptionJob | None = None
    polling_started_at: float | None = None
    poll_count: int = 0


class TranscriptionClient:
    """
    Obtains a transcript for an audio or video file from a remote provider.

    Each call walks UPLOADING -> JOB_CREATED -> POLLING and ends in
    COMPLETED, FAILED or TIMED_OUT. Step failures raised by the provider
    abort the run immediately; nothing is retried. The timeout covers the
    polling phase only.
    """

    def __init__(
        self,
        provider: TranscriptionProvider,
        polling: PollingConfig,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._provider = provider
        self._polling = polling
        self._clock = clock
        self._sleep = sleep

    def transcribe(self, request: TranscriptionRequest) -> TranscriptionOutcome:
        """
        Transcribes one media item.

        Args:
            request: Media bytes with their filename, MIME type and kind.

        Returns:
            TranscriptionOutcome with the transcript text.

        Raises:
            ConfigurationError: If no API key is configured.
            UploadError: If the upload step fails.
            JobCreationError: If the job cannot be created.
            PollError: If a status request fails.
            TranscriptionFailedError: If the provider reports an error.
            TranscriptionTimeoutError: If the job outlives the poll ceiling.
        """
        self._provider.check_credentials()

        run = TranscriptionRun(request=request)
        logger.info(
            "Transcription started",
            extra={
                "file_name": request.filename,
                "media_kind": request.media_kind,
                "size_bytes": len(request.data),
            },
        )

        while not run.state.is_terminal:
            self._advance(run)

        return self._finish(run)

    def _advance(self, run: TranscriptionRun) -> None:
        """Performs the work of the current state and moves to the next one."""
        if run.state is TranscriptionState.UPLOADING:
            run.upload_url = self._provider.upload(run.request.data)
            run.job = self._provider.create_job(run.upload_url)
            self._transition(run, TranscriptionState.JOB_CREATED)

        elif run.state is TranscriptionState.JOB_CREATED:
            run.polling_started_at = self._clock()
            self._transition(run, TranscriptionState.POLLING)

        elif run.state is TranscriptionState.POLLING:
            self._poll_once(run)

    def _poll_once(self, run: TranscriptionRun) -> None:
        elapsed = self._clock() - run.polling_started_at
        if elapsed >= self._polling.timeout_seconds:
            self._transition(run, TranscriptionState.TIMED_OUT)
            return

        run.job = self._provider.get_job(run.job.id)
        run.poll_count += 1

        if run.job.is_completed:
            self._transition(run, TranscriptionState.COMPLETED)
        elif run.job.is_failed:
            self._transition(run, TranscriptionState.FAILED)
        else:
            self._sleep(self._polling.interval_seconds)

    def _finish(self, run: TranscriptionRun) -> TranscriptionOutcome:
        if run.state is TranscriptionState.FAILED:
            raise TranscriptionFailedError(run.job.id, run.job.error)

        if run.state is TranscriptionState.TIMED_OUT:
            raise TranscriptionTimeoutError(run.job.id, self._polling.timeout_seconds)

        outcome = TranscriptionOutcome(
            text=run.job.text or "",
            filename=run.request.filename,
            mime_type=run.request.mime_type,
            media_kind=run.request.media_kind,
        )
        logger.info(
            "Transcription completed",
            extra={
                "job_id": run.job.id,
                "file_name": outcome.filename,
                "polls": run.poll_count,
                "transcript_chars": len(outcome.text),
            },
        )
        return outcome

    def _transition(self, run: TranscriptionRun, state: TranscriptionState) -> None:
        logger.info(
            "Transcription state changed",
            extra={
                "from_state": run.state.value,
                "to_state": state.value,
                "job_id": run.job.id if run.job else None,
                "polls": run.poll_count,
            },
        )
        run.state = state
