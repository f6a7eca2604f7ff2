"""
Pytest configuration and shared fixtures for fast-entity tests.
"""

from typing import Any, Optional

import pytest
from faker import Faker

from fast_entity.contracts.lookup import Lookup
from fast_entity.core.content_type import ContentTypeSchema

fake = Faker()


class FakeLookup(Lookup):
    """Records every query and answers with a canned record (or raises)."""

    def __init__(self, result: Optional[dict[str, Any]] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def find_one(self, query: dict[str, Any]) -> Optional[dict[str, Any]]:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def lookup():
    return FakeLookup()


@pytest.fixture
def make_model():
    def _make_model(attributes: dict[str, dict], **options) -> ContentTypeSchema:
        return ContentTypeSchema.model_validate({
            "kind": "contentType",
            "modelName": "test-model",
            "uid": "test-uid",
            "privateAttributes": [],
            "options": options,
            "attributes": attributes,
        })
    return _make_model


@pytest.fixture
def sample_data():
    """Provide sample data for tests."""
    return {
        "title": fake.sentence(nb_words=3),
        "slug": fake.slug(),
        "count": fake.pyint(min_value=0, max_value=100),
    }


