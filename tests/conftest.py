from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from task_tracker.api.main import create_app
from task_tracker.api.settings import Settings
from task_tracker.api.store import TaskStore

from .factories import make_settings


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def app(store: TaskStore, settings: Settings):
    """A fresh application per test so ids always start at 1."""
    return create_app(store=store, settings=settings)


@pytest.fixture()
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
