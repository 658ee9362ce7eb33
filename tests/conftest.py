"""Shared fixtures — every test starts and ends with an empty auth config."""

from collections.abc import Iterator

import pytest

from perch.config import configure


@pytest.fixture(autouse=True)
def _reset_auth_config() -> Iterator[None]:
    configure(None)
    yield
    configure(None)
