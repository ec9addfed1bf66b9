"""Shared test fixtures."""

from datetime import datetime

import pytest

from fieldcheck.validation import base
from fieldcheck.validation.base import field


@pytest.fixture
def person_schema() -> dict:
    """Fixture providing a two-level schema with required fields."""
    return {
        "name": field("name").string().required(),
        "address": {"city": field("city").string().required()},
    }


@pytest.fixture
def fixed_today(monkeypatch) -> datetime:
    """Pin the start of the current day to 2024-05-15 00:00."""
    today = datetime(2024, 5, 15)
    monkeypatch.setattr(base, "start_of_today", lambda: today)
    return today
