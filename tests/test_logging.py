"""
Tests for the JSON log formatter.
"""

import json
import logging

from app.core.config import settings
from app.core.logging import CatalogJsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "Created movie 3", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_record_has_service_metadata() -> None:
    formatter = CatalogJsonFormatter("%(asctime)s %(level)s %(name)s %(message)s")
    data = json.loads(formatter.format(_record()))

    assert data["message"] == "Created movie 3"
    assert data["level"] == "INFO"
    assert data["name"] == "app.test"
    assert data["service"] == settings.PROJECT_NAME
    assert "movie_id" not in data


def test_json_record_carries_context_fields() -> None:
    formatter = CatalogJsonFormatter("%(asctime)s %(level)s %(name)s %(message)s")
    data = json.loads(formatter.format(_record(movie_id=3, user_id=9)))

    assert data["movie_id"] == 3
    assert data["user_id"] == 9
