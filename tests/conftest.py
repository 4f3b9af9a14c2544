import pytest

import config


@pytest.fixture
def lenient_mode(monkeypatch):
    """Switch the active parameter set to LENIENT for one test."""
    monkeypatch.setattr(config, "STRICT_MODE", False)
    yield
