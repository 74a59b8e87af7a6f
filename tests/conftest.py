"""Shared fixtures: deterministic collaborators for plugin tests."""

from datetime import datetime, timezone

import pytest

from configaudit.core.config import Config


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


class SequentialIDGenerator:
    """ID generator yielding scan-1, scan-2, ..."""

    def __init__(self):
        self.count = 0

    def generate_id(self) -> str:
        self.count += 1
        return f"scan-{self.count}"


@pytest.fixture
def clock():
    return FixedClock(datetime(2021, 3, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def id_generator():
    return SequentialIDGenerator()


@pytest.fixture
def config():
    return Config(
        conftest_image_ref="example.com/conftest:v1.2.3",
        service_account_name="configaudit",
    )


@pytest.fixture
def unset_config():
    return Config(conftest_image_ref="", service_account_name="configaudit")
