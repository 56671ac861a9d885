import os

# The store is built at import time; point it at a throwaway in-memory database.
os.environ["DEEPDIG_DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402

from deep_diggers.services.store import store  # noqa: E402


@pytest.fixture(autouse=True)
def clear_store() -> None:
    """Isolate tests by emptying the sessions table."""
    store.clear()
    yield
    store.clear()
