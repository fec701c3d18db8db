# type: ignore
import pytest

import unit_utils


@pytest.fixture
def with_quine():
    yield unit_utils.load_program('quine.ic')


@pytest.fixture
def with_compare8():
    yield unit_utils.load_program('compare8.ic')


@pytest.fixture
def with_feedback_amp():
    yield unit_utils.load_program('amp_feedback.ic')
