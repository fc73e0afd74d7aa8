"""Shared fixtures and import-path setup for the test suite."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()

from wordseg.frequency_model import FrequencyModel  # noqa: E402

CORPUS_SIZE = 1024908267229

FOX_COUNTS = {
    "the": 23135851162,
    "quick": 2932498,
    "brown": 4932356,
    "fox": 6285198,
    "jumps": 1254345,
    "over": 111881477,
    "lazy": 1697752,
    "dog": 16325359,
}


@pytest.fixture
def fox_model() -> FrequencyModel:
    return FrequencyModel.from_counts(FOX_COUNTS, corpus_size=CORPUS_SIZE).freeze()
