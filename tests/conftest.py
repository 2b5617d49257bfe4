"""Pytest configuration and shared fixtures for remote_maybe tests."""

import pytest
from hypothesis import HealthCheck, settings

from remote_maybe import _config
from remote_maybe._logging import clear_log_hooks

# The autouse config reset is function scoped; property tests here are pure and
# do not depend on it being re-run per example.
settings.register_profile('remote_maybe', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('remote_maybe')


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test from default settings and no environment overrides."""
    monkeypatch.delenv('REMOTE_MAYBE_STRICT_PATTERNS', raising=False)
    monkeypatch.delenv('REMOTE_MAYBE_LOG_LEVEL', raising=False)
    _config.reset()
    yield
    _config.reset()


@pytest.fixture
def captured_events():
    """Collect log event dicts emitted while the test runs."""
    from remote_maybe import configure_logging
    from remote_maybe._logging import add_log_hook

    events: list[dict] = []
    configure_logging(level='DEBUG', json_output=True)
    clear_log_hooks()
    add_log_hook(events.append)
    yield events
    clear_log_hooks()


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from remote_maybe import Present

    return Present(42)


@pytest.fixture
def sample_succeeded():
    """Sample Succeeded value for testing."""
    from remote_maybe import Succeeded

    return Succeeded(42)


@pytest.fixture
def sample_failed():
    """Sample Failed value for testing."""
    from remote_maybe import Failed

    return Failed(ValueError('test error'))
