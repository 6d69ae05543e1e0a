import asyncio

import pytest

from app.agents.answer import AnswerAgent
from app.core.config import Settings
from app.core.errors import BadRequestError
from app.modules.bfhl.service import (
    MULTIPLE_KEYS_MESSAGE,
    NO_KEY_MESSAGE,
    OperationKind,
    process_request,
    select_operation,
)
from tests.conftest import FakeLLM

EMAIL = "ops@example.edu"


def _process(payload, llm=None, settings=None, agent_factory=None):
    settings = settings or Settings(OFFICIAL_EMAIL=EMAIL)
    llm = llm or FakeLLM()
    agent_factory = agent_factory or (lambda: AnswerAgent(llm=llm))
    return asyncio.run(process_request(payload, settings, agent_factory))


def test_select_operation_ignores_unknown_keys():
    operation = select_operation({"fibonacci": 5, "note": "hello", "Fibonacci": 2})
    assert operation.kind is OperationKind.FIBONACCI
    assert operation.value == 5


def test_select_operation_maps_ai_key():
    operation = select_operation({"AI": "Capital of France?"})
    assert operation.kind is OperationKind.AI


@pytest.mark.parametrize(
    "payload,message",
    [
        ({}, NO_KEY_MESSAGE),
        ({"ai": "lowercase is not recognized"}, NO_KEY_MESSAGE),
        ({"fibonacci": 5, "prime": [2, 3]}, MULTIPLE_KEYS_MESSAGE),
        ([1, 2, 3], "Request body must be a JSON object"),
        (None, "Request body must be a JSON object"),
    ],
)
def test_select_operation_rejects_bad_envelopes(payload, message):
    with pytest.raises(BadRequestError) as excinfo:
        select_operation(payload)
    assert excinfo.value.message == message


def test_process_request_success_envelope():
    status, response = _process({"hcf": [12, 18, 24]})
    assert status == 200
    assert response.to_payload() == {"is_success": True, "official_email": EMAIL, "data": 6}


def test_process_request_rejects_before_running_anything():
    llm = FakeLLM()
    status, response = _process({"AI": "Who?", "lcm": [2, 3]}, llm=llm)
    assert status == 400
    assert response.to_payload() == {
        "is_success": False,
        "official_email": EMAIL,
        "error": MULTIPLE_KEYS_MESSAGE,
    }
    assert llm.calls == []


def test_process_request_surfaces_validation_message():
    status, response = _process({"lcm": [-2, 4]})
    assert status == 400
    assert response.error == "All elements must be positive integers"
    assert "data" not in response.to_payload()


def test_process_request_routes_ai_to_agent():
    llm = FakeLLM(text="**Paris.**")
    status, response = _process({"AI": "Capital of France?"}, llm=llm)
    assert status == 200
    assert response.data == "Paris"
    assert len(llm.calls) == 1


def test_process_request_hides_ai_provider_errors():
    llm = FakeLLM(error=RuntimeError("quota exceeded for project 1234"))
    status, response = _process({"AI": "Capital of France?"}, llm=llm)
    assert status == 400
    assert response.error == "AI API request failed"


def test_process_request_catches_unexpected_errors(monkeypatch):
    def boom(value, max_terms=None):
        raise RuntimeError("kaboom")

    monkeypatch.setattr("app.modules.bfhl.numeric.fibonacci", boom)
    status, response = _process({"fibonacci": 3})
    assert status == 400
    assert response.is_success is False
    assert response.error == "kaboom"


def test_numeric_operations_never_build_the_agent():
    def factory():
        raise AssertionError("agent must not be built for numeric keys")

    status, response = _process({"prime": [2, 4, 5]}, agent_factory=factory)
    assert status == 200
    assert response.data == [2, 5]


def test_agent_construction_failure_is_reported_as_ai_failure():
    def factory():
        raise ValueError("Unsupported LLM provider: nope")

    status, response = _process({"AI": "Capital of France?"}, agent_factory=factory)
    assert status == 400
    assert response.error == "AI API request failed"
    assert response.official_email == EMAIL


def test_fibonacci_cap_comes_from_settings():
    settings = Settings(OFFICIAL_EMAIL=EMAIL, FIBONACCI_MAX_TERMS=3)

    status, response = _process({"fibonacci": 3}, settings=settings)
    assert status == 200
    assert response.data == [0, 1, 1]

    status, response = _process({"fibonacci": 4}, settings=settings)
    assert status == 400
    assert response.error == "Input must not exceed 3 terms"
