"""Custom exceptions for the fraud-screener service."""


class TranscriptionError(Exception):
    """Base class for failures of the media transcription pipeline."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigurationError(TranscriptionError):
    """Raised when the provider credential is missing."""

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(
            f"AssemblyAI API key not configured. Set {setting} in the environment."
        )


class UploadError(TranscriptionError):
    """Raised when uploading media bytes to the provider fails."""

    def __init__(self, detail: str, cause: Exception | None = None):
        self.detail = detail
        super().__init__(f"Upload failed: {detail}", cause)


class JobCreationError(TranscriptionError):
    """Raised when the provider refuses to create a transcription job."""

    def __init__(self, detail: str, cause: Exception | None = None):
        self.detail = detail
        super().__init__(f"Create transcription failed: {detail}", cause)


class PollError(TranscriptionError):
    """Raised when a job status request is not successful."""

    def __init__(self, job_id: str, detail: str, cause: Exception | None = None):
        self.job_id = job_id
        self.detail = detail
        super().__init__(f"Polling failed: {detail}", cause)


class TranscriptionFailedError(TranscriptionError):
    """Raised when the provider reports the job itself as failed."""

    def __init__(self, job_id: str, provider_message: str | None = None):
        self.job_id = job_id
        self.provider_message = provider_message or "Transcription failed"
        super().__init__(self.provider_message)


class TranscriptionTimeoutError(TranscriptionError):
    """Raised when a job does not finish within the polling ceiling."""

    def __init__(self, job_id: str, timeout_seconds: float):
        self.job_id = job_id
        self.timeout_seconds = timeout_seconds
        super().__init__("Transcription timed out. Please try again.")


class EmptyInputError(Exception):
    """Raised when text submitted for analysis is blank."""

    def __init__(self):
        super().__init__("No input detected.")


class InvalidTextFileError(Exception):
    """Raised when an uploaded text file has an unsupported type."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__("Invalid file type. Please upload a .txt or .csv file.")


class InvalidMediaError(Exception):
    """Raised when an uploaded media file has an unsupported extension."""

    def __init__(self, file_name: str, media_kind: str):
        self.file_name = file_name
        self.media_kind = media_kind
        super().__init__("Please upload a valid audio/video file.")
