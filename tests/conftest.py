"""Root test configuration: isolate each test from local config and LINEDIFF_* env vars"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no LINEDIFF_* overrides so defaults apply."""
    for name in list(os.environ):
        if name.startswith("LINEDIFF_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
