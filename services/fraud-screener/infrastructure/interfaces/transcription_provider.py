"""Abstract interface for an asynchronous speech-to-text provider."""

from abc import ABC, abstractmethod

from domain.models import TranscriptionJob


class TranscriptionProvider(ABC):
    """Upload, job-creation and status operations of a transcription API."""

    @abstractmethod
    def check_credentials(self) -> None:
        """
        Verifies that a credential is configured, without network access.

        Raises:
            ConfigurationError: If the API key is missing.
        """

    @abstractmethod
    def upload(self, data: bytes) -> str:
        """
        Uploads raw media bytes.

        Args:
            data: The media file contents.

        Returns:
            The provider-side location of the uploaded media.

        Raises:
            UploadError: If the upload is rejected or the response is unusable.
        """

    @abstractmethod
    def create_job(self, upload_url: str) -> TranscriptionJob:
        """
        Starts a transcription job for previously uploaded media.

        Args:
            upload_url: Location returned by upload().

        Returns:
            The newly created job.

        Raises:
            JobCreationError: If the job cannot be created.
        """

    @abstractmethod
    def get_job(self, job_id: str) -> TranscriptionJob:
        """
        Fetches the current state of a job.

        Args:
            job_id: Identifier returned by create_job().

        Returns:
            The job with its latest status.

        Raises:
            PollError: If the status request is not successful.
        """
