from __future__ import annotations

import datetime as dt

import pytest

from lineage_metagen.config import MetadataConfig
from lineage_metagen.generator import MetadataGenerator


def fixed_clock(tz):
    return dt.datetime(2024, 3, 1, 9, 30, tzinfo=tz)


@pytest.fixture
def make_generator():
    def _make(**config_kwargs):
        config_kwargs.setdefault("seed", 1234)
        return MetadataGenerator(MetadataConfig(**config_kwargs), clock=fixed_clock)

    return _make
