"""Shared fixtures for ngsi2poi tests."""

from __future__ import annotations

import copy

import pytest

from ngsi2poi.transformers.common import RenderContext

LOCATION = {
    "type": "Point",
    "coordinates": [-3.712247222, 40.423852778],
}

BASE_URL = "https://wirecloud.example.org/operators/ngsi2poi/"


def make_entity(entity_type: str, **attrs) -> dict:
    """Build an entity with a valid location plus the given attributes."""
    entity = {
        "id": "entity-1",
        "type": entity_type,
        "location": copy.deepcopy(LOCATION),
    }
    entity.update(attrs)
    return entity


@pytest.fixture
def ctx() -> RenderContext:
    return RenderContext(language="en", asset_base_url=BASE_URL)


@pytest.fixture
def coordinates() -> dict:
    return {"system": "WGS84", "lng": LOCATION["coordinates"][0], "lat": LOCATION["coordinates"][1]}


@pytest.fixture
def emitted():
    """Collect everything pushed to the output endpoint."""

    class _Collector(list):
        def __call__(self, pois):
            self.append(pois)

    return _Collector()
