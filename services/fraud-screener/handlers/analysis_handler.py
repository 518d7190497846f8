"""Handler for screening text, audio and video submissions."""

import os

from fraudshield_common import setup_logging

from domain import (
    AnalysisResult,
    KeywordRiskClassifier,
    TranscriptionClient,
    TranscriptionRequest,
    highlight,
)
from domain.models import MediaKind, UserAction
from exceptions import EmptyInputError, InvalidMediaError, InvalidTextFileError

logger = setup_logging()

MEDIA_EXTENSIONS: dict[str, tuple[str, ...]] = {
    "audio": (".mp3", ".wav", ".m4a"),
    "video": (".mp4", ".mov", ".avi"),
}

DEFAULT_MIME_TYPES: dict[str, str] = {
    "audio": "audio/mpeg",
    "video": "video/mp4",
}

TEXT_FILE_EXTENSIONS = (".txt", ".csv")

NO_EVIDENCE_EXPLANATION = "No evidence terms found."

ACTION_MESSAGES: dict[str, str] = {
    "block": "Content blocked and added to blacklist",
    "report": "Content reported to authorities",
    "ignore": "Content marked as safe",
}


class AnalysisHandler:
    """Orchestrates transcription and classification for each channel."""

    def __init__(
        self,
        transcription_client: TranscriptionClient,
        text_classifier: KeywordRiskClassifier,
        transcript_classifier: KeywordRiskClassifier,
        text_file_max_chars: int = 5000,
    ):
        self._transcription_client = transcription_client
        self._text_classifier = text_classifier
        self._transcript_classifier = transcript_classifier
        self._text_file_max_chars = text_file_max_chars

    def analyze_text(self, text: str) -> AnalysisResult:
        """
        Screens typed text with the evidence-only classifier.

        Raises:
            EmptyInputError: If the text is blank.
        """
        if not text or not text.strip():
            raise EmptyInputError()

        verdict = self._text_classifier.classify(text)

        return AnalysisResult(
            channel="text",
            verdict=verdict,
            explanation=verdict.explanation or NO_EVIDENCE_EXPLANATION,
            highlights=highlight(text, self._text_classifier.keywords),
        )

    def load_text_file(self, file_name: str, content_type: str | None, data: bytes) -> str:
        """
        Reads an uploaded text file, truncated to the configured length.

        Raises:
            InvalidTextFileError: If the file is neither text/* nor .txt/.csv.
        """
        is_text_type = (content_type or "").startswith("text/")
        if not is_text_type and not file_name.lower().endswith(TEXT_FILE_EXTENSIONS):
            raise InvalidTextFileError(file_name)

        content = data.decode("utf-8", errors="replace")
        logger.info(
            "Text file loaded",
            extra={
                "file_name": file_name,
                "chars": len(content),
                "truncated": len(content) > self._text_file_max_chars,
            },
        )
        return content[: self._text_file_max_chars]

    def analyze_media(
        self,
        media_kind: MediaKind,
        file_name: str,
        content_type: str | None,
        data: bytes,
    ) -> AnalysisResult:
        """
        Transcribes an audio or video file and screens the transcript.

        Args:
            media_kind: "audio" or "video".
            file_name: Original file name, used for extension validation.
            content_type: Declared MIME type, may be empty.
            data: File contents.

        Returns:
            AnalysisResult including the transcript.

        Raises:
            InvalidMediaError: If the extension does not match the media kind.
            TranscriptionError: If any transcription step fails.
        """
        if not file_name.lower().endswith(MEDIA_EXTENSIONS[media_kind]):
            raise InvalidMediaError(file_name, media_kind)

        request = TranscriptionRequest(
            data=data,
            mime_type=content_type or DEFAULT_MIME_TYPES[media_kind],
            filename=file_name,
            media_kind=media_kind,
        )

        logger.info(
            "Analyzing media",
            extra={"file_name": file_name, "media_kind": media_kind},
        )

        outcome = self._transcription_client.transcribe(request)
        verdict = self._transcript_classifier.classify(outcome.text)

        return AnalysisResult(
            channel=media_kind,
            verdict=verdict,
            explanation=verdict.explanation,
            transcript=outcome.text,
            highlights=highlight(outcome.text, self._transcript_classifier.keywords),
        )

    def apply_action(
        self, result: AnalysisResult, action: UserAction
    ) -> tuple[AnalysisResult, str]:
        """Records the user's decision on a copy of the result."""
        updated = result.model_copy(
            update={"verdict": result.verdict.model_copy(update={"action": action})}
        )
        logger.info(
            "User action recorded",
            extra={"channel": result.channel, "action": action},
        )
        return updated, ACTION_MESSAGES[action]
