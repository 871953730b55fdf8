import pytest

from aad_graph import Session, use_session


@pytest.fixture
def session():
    """Fresh naming session for each test so symbols start at 1."""
    with use_session(Session()) as s:
        yield s
