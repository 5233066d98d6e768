"""Test fixtures for formhandler."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from formhandler.form import Form
from formhandler.validators.base import AbstractValidator


class CountingValidator(AbstractValidator):
    """Validator stub that records how often it was evaluated."""

    def __init__(self, result=True, message="Counted validator failed.", required=False):
        super().__init__(required=required, message=message)
        self.result = result
        self.calls = 0

    def is_valid(self):
        self.calls += 1
        return self.result


@pytest.fixture
def form():
    """A form that has not been submitted."""
    return Form()


@pytest.fixture
def submitted_form():
    """Factory for a form submitted with the given data."""
    def _make(data, **kwargs):
        return Form(data, submitted=True, **kwargs)
    return _make


@pytest.fixture
def counting_validator():
    return CountingValidator
