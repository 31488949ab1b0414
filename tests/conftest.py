import base64
import os

import pytest

from signup.graph import SignupGraphFactory
from signup.validator import SignupValidator


@pytest.fixture(autouse=True)
def encryption_key(monkeypatch):
    key = base64.b64encode(os.urandom(32)).decode("utf-8")
    monkeypatch.setenv("ENCRYPTION_KEY", key)
    return key


@pytest.fixture
def validator():
    return SignupValidator()


@pytest.fixture
def valid_values():
    return {
        "first_name": "Khushi",
        "last_name": "Kaushik",
        "dob": "2004-01-01",
        "email": "khushi@gmail.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "phone": "9999999999",
        "country": "India",
    }


@pytest.fixture
def graph():
    from langgraph.checkpoint.memory import InMemorySaver

    return SignupGraphFactory(SignupValidator()).compile(checkpointer=InMemorySaver())
