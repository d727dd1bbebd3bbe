import pytest

from lox.lox_errors import ErrorReporter


@pytest.fixture  # type: ignore[misc]
def reporter() -> ErrorReporter:
    return ErrorReporter()
