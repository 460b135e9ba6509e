# tests/conftest.py
"""
Pytest fixtures shared by the unit and API tests.
"""

import json

import pytest

from credcheck.models.schema import AssessmentDetails
from fakes import FakeLLM, FakeReader, make_assessment


@pytest.fixture
def calls():
    return []


@pytest.fixture
def reader(calls):
    return FakeReader(calls)


@pytest.fixture
def llm_factory(calls):
    """Factory standing in for LLMAgent; remembers the key it was built with."""
    def factory(api_key):
        calls.append(("llm", api_key))
        return FakeLLM(calls)
    return factory


@pytest.fixture
def assessment_json():
    return json.dumps(make_assessment())


@pytest.fixture
def fallback_details():
    return AssessmentDetails.uniform(score=50, html="").model_dump()
