import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _detach_log_handlers():
    # configure_logging binds the root handler to whatever sys.stdout was at
    # call time (capsys / CliRunner streams that are closed after the test).
    yield
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()
