import pytest

from conventional_commit_parser.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test reads settings from a known environment."""
    for name in ("COMMIT_PARSER_MAX_LENGTH", "COMMIT_PARSER_HOST", "COMMIT_PARSER_PORT",
                 "ERROR_INCLUDE_DETAILS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
