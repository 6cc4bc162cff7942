import pytest

from lazyiter import IterConfig


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Give every test a config that reads a clean environment."""
    monkeypatch.delenv("LAZYITER_TRACE", raising=False)
    IterConfig.global_config().reset()
    yield
    IterConfig.global_config().reset()


@pytest.fixture
def recorder():
    """A list plus an identity function that appends what it sees to it."""
    seen = []

    def record(x):
        seen.append(x)
        return x

    return seen, record
