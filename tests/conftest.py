import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI reconfigures structlog globally; undo it after every test."""
    yield
    structlog.reset_defaults()
