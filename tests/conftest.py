"""Shared pytest fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(request, monkeypatch):
    """Keep a developer's GitHub token out of unit tests."""
    if request.node.get_closest_marker("integration"):
        return
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("SOCIALPROBE_GITHUB_TOKEN", raising=False)
