import logging
import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    # configure_logging() binds to whatever stream it is given; don't leak it across tests
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
