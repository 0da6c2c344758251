"""Fixtures for command tests."""

import os

import pytest

from speccraft.commands import new


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every command without a config file or SPECCRAFT_* overrides."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SPECCRAFT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def session_id(store):
    """Id of a freshly created session in ``store``."""
    return new.new("Comments", "Let readers comment on posts", store=store).session_id


@pytest.fixture
def completed_session_id(store, completed_engine):
    """Id of a stored session with every question answered."""
    store.save(completed_engine.session)
    return completed_engine.session.id
