import itertools
import random

import pytest

from daymark.storage import CalendarStorage, MemoryStore
from daymark.store import CalendarStore


@pytest.fixture
def memory_store():
    """Empty in-memory slot backend."""
    return MemoryStore()


@pytest.fixture
def storage(memory_store):
    """Calendar storage backed by the in-memory slots."""
    return CalendarStorage(memory_store)


@pytest.fixture
def id_factory():
    """Deterministic calendar ids: cal-1, cal-2, ..."""
    counter = itertools.count(1)
    return lambda: f"cal-{next(counter)}"


@pytest.fixture
def store(storage, id_factory):
    """Empty calendar store persisting to ``storage``."""
    return CalendarStore(storage=storage, rng=random.Random(0), id_factory=id_factory)
