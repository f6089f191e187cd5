from __future__ import annotations

import pytest

from gender_cam.gender import network


@pytest.fixture(autouse=True)
def block_model_downloads(monkeypatch):
    """Never hit the network for model files during tests."""

    def _fail(urls, dest):
        raise network.ModelLoadError(f"download blocked in tests: {dest}")

    monkeypatch.setattr(network, "_download", _fail)
    yield
