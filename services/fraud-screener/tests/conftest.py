"""Shared fakes for the fraud-screener tests."""

import json

import pytest
from fraudshield_common import AssemblyAIConfig, PollingConfig

from domain import TranscriptionClient, TranscriptionJob, TranscriptionRequest
from exceptions import ConfigurationError
from infrastructure import AssemblyAIProvider
from infrastructure.interfaces import TranscriptionProvider


class FakeResponse:
    """Stands in for requests.Response."""

    def __init__(self, status_code=200, json_body=None, text=None):
        self.status_code = status_code
        self._json_body = json_body
        if text is None:
            text = json.dumps(json_body) if json_body is not None else ""
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_body is None:
            raise ValueError("Response body is not JSON")
        return self._json_body


class FakeSession:
    """Replays queued responses and records every request made."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def post(self, url, **kwargs):
        return self._next("POST", url, kwargs)

    def get(self, url, **kwargs):
        return self._next("GET", url, kwargs)

    def _next(self, method, url, kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError(f"Unexpected {method} {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClock:
    """Monotonic clock that only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeProvider(TranscriptionProvider):
    """Provider whose poll results come from a list of jobs."""

    def __init__(self, jobs=None, configured=True, endless_status=None):
        self._jobs = list(jobs or [])
        self._configured = configured
        self._endless_status = endless_status
        self.calls = []

    def check_credentials(self):
        self.calls.append("check_credentials")
        if not self._configured:
            raise ConfigurationError("ASSEMBLYAI_API_KEY")

    def upload(self, data):
        self.calls.append("upload")
        return "https://cdn.example/upload/abc"

    def create_job(self, upload_url):
        self.calls.append("create_job")
        return TranscriptionJob(id="job-1", status="queued")

    def get_job(self, job_id):
        self.calls.append("get_job")
        if self._jobs:
            job = self._jobs.pop(0)
            if isinstance(job, Exception):
                raise job
            return job
        if self._endless_status is not None:
            return TranscriptionJob(id=job_id, status=self._endless_status)
        raise AssertionError("No more poll results queued")


@pytest.fixture
def assemblyai_config():
    return AssemblyAIConfig(api_key="test-key", base_url="https://stt.example/v2")


@pytest.fixture
def polling_config():
    return PollingConfig()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def make_client(polling_config, fake_clock):
    def _make(provider):
        return TranscriptionClient(
            provider, polling_config, clock=fake_clock, sleep=fake_clock.sleep
        )

    return _make


@pytest.fixture
def make_http_client(assemblyai_config, polling_config, fake_clock):
    def _make(session, config=None):
        provider = AssemblyAIProvider(session, config or assemblyai_config)
        return TranscriptionClient(
            provider, polling_config, clock=fake_clock, sleep=fake_clock.sleep
        )

    return _make


@pytest.fixture
def audio_request():
    return TranscriptionRequest(
        data=b"RIFF....WAVEfmt ",
        mime_type="audio/wav",
        filename="call.wav",
        media_kind="audio",
    )
