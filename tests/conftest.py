"""Root conftest — shared test configuration."""

import pytest

from exam_client.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Tests never pick up a developer's EXAM_CLIENT_* environment."""
    for var in (
        "EXAM_CLIENT_API_BASE_URL",
        "EXAM_CLIENT_LOG_LEVEL",
        "EXAM_CLIENT_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
