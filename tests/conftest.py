import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from core.extraction.models import ParsedData
from core.extraction.patient_message_extractor import PatientMessageExtractor
from exceptions.exceptions import ExtractionError
from runtime.agents.intake_agent import IntakeAgent
from runtime.store.log_store import LogStore


class FakeBackend:
    """ExtractionBackend returning a fixed ParsedData, or raising."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def extract(self, message):
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return self.result


def make_completion(arguments):
    """Build an object shaped like a Chat Completions response with one tool call."""
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    tool_call = SimpleNamespace(
        type="function",
        function=SimpleNamespace(name="parse_patient_message", arguments=arguments),
    )
    message = SimpleNamespace(content=None, tool_calls=[tool_call])
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAIClient:
    """Stand-in for openai.OpenAI exposing chat.completions.create."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def test_patient():
    return ParsedData(intent="appointment_request", name="Test Patient", phone="0412345678")


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs.json"


@pytest.fixture
def store(log_path):
    return LogStore(log_path)


@pytest.fixture
def backend(test_patient):
    return FakeBackend(result=test_patient)


@pytest.fixture
def agent(store, backend):
    return IntakeAgent(log_store=store, extractor=PatientMessageExtractor(backend=backend))


@pytest.fixture
def dashboard_file(tmp_path):
    path = tmp_path / "dashboard.html"
    path.write_text("<html><body>Patient Message Log</body></html>", encoding="utf-8")
    return path


@pytest.fixture
def client(store, agent, dashboard_file):
    from runtime.api.server import create_app

    app = create_app(log_store=store, intake_agent=agent, dashboard_file=dashboard_file)
    return TestClient(app)


def read_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def extraction_error():
    return ExtractionError("OpenAI chat completion failed.", details="connection reset")
