import pytest


@pytest.fixture(autouse=True)
def isolated_polyglot_env(monkeypatch):
    """Keep POLYGLOT_* variables of the host environment out of the tests."""
    monkeypatch.delenv("POLYGLOT_PREFERRED_LANGUAGE", raising=False)
    monkeypatch.delenv("POLYGLOT_OVERRIDE_POLICY", raising=False)
