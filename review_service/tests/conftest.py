from datetime import datetime, timedelta, timezone

import pytest
from django.apps import apps

from review_service.data.store import JsonFileStore
from review_service.services.scheduler import ReviewScheduler

T0 = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now=T0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return ReviewScheduler(clock=clock)


@pytest.fixture
def progress_file(tmp_path):
    return tmp_path / "progress.json"


@pytest.fixture
def app_scheduler(progress_file):
    """Swap the app-owned scheduler for one persisting under tmp_path."""
    config = apps.get_app_config("review_service")
    original = config.scheduler
    config.scheduler = ReviewScheduler.from_store(JsonFileStore(progress_file))
    yield config.scheduler
    config.scheduler.close()
    config.scheduler = original
