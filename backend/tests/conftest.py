"""Shared fixtures: a fake scoring oracle and an app wired to it."""
import json

import pytest
from fastapi.testclient import TestClient

from ielts_writer.container import build_container
from ielts_writer.main import create_app

from fakes import FakeOracle


@pytest.fixture
def evaluation_payload():
    def _make(**overrides):
        payload = {
            "score": 6.5,
            "taskResponse": 7,
            "coherenceCohesion": 6.5,
            "lexicalResource": 6,
            "grammaticalRange": 6.5,
            "feedback": "A clear position, developed with relevant examples.",
            "strengths": ["Clear thesis", "Good paragraphing"],
            "improvements": ["Vary sentence openings"],
            "wordCount": 262,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def essay_text():
    def _make(words):
        return " ".join(f"word{i}" for i in range(words))

    return _make


@pytest.fixture
def fake_oracle(evaluation_payload):
    return FakeOracle(reply=json.dumps(evaluation_payload()))


@pytest.fixture
def container(fake_oracle):
    return build_container(oracle=fake_oracle)


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as c:
        yield c
