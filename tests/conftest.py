from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from ukrainian_learning_api.app.core.config import TRANSLATE_API_KEY_VARS
from ukrainian_learning_api.app.core.seed import seed_storage
from ukrainian_learning_api.app.core.storage import MemStorage
from ukrainian_learning_api.app.main import create_app
from ukrainian_learning_api.app.services.translation_service import TranslationService

# Before the seeded festival dates, so both seeded events are upcoming.
NOW = datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc)


class TickingClock:
    """Returns NOW, NOW + 1s, NOW + 2s, ... on successive calls."""

    def __init__(self, start: datetime = NOW, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture(autouse=True)
def no_translate_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in TRANSLATE_API_KEY_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    return lambda: NOW


@pytest.fixture
def storage(clock: TickingClock) -> MemStorage:
    return MemStorage(clock=clock)


@pytest.fixture
def seeded_storage(clock: TickingClock) -> MemStorage:
    store = MemStorage(clock=clock)
    seed_storage(store)
    return store


@pytest.fixture
def client(seeded_storage: MemStorage) -> TestClient:
    app = create_app(storage=seeded_storage, translation_service=TranslationService())
    return TestClient(app)
