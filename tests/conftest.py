import logging

import pytest

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "GEMATRIX_METHOD",
        "GEMATRIX_COUNT_NIKKUD",
        "GEMATRIX_DISTINCT_VOWELIZATIONS",
        "GEMATRIX_HOST",
        "GEMATRIX_PORT",
    ):
        monkeypatch.delenv(name, raising=False)

@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("gematrix")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
