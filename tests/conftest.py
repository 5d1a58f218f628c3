"""
Pytest configuration and fixtures for semgraph tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports like `semgraph.*`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from semgraph.models import IndexedToken


@pytest.fixture(autouse=True)
def clean_semgraph_environment(monkeypatch):
    """Keep SEMGRAPH_* variables from the developer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("SEMGRAPH_"):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def make_token():
    """Factory for tokens in a given sentence."""

    def _make(position, word="", sentence_index=0, **kwargs):
        return IndexedToken(
            sentence_index=sentence_index,
            position=position,
            word=word,
            value=word,
            **kwargs,
        )

    return _make
