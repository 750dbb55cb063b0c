"""Pytest fixtures shared across the chartbridge tests."""

from __future__ import annotations

import pytest

import chartbridge
from chartbridge.bridge import set_default_engine


class RecordingEngine:
    """Engine stand-in that records every call and returns a fixed handle."""

    def __init__(self):
        self.calls = []
        self.result = object()
        self.error = None

    def _record(self, kind, args, options):
        self.calls.append((kind, args, options))
        if self.error is not None:
            raise self.error
        return self.result

    def scatter(self, x, y, mode, **options):
        return self._record('scatter', (x, y, mode), options)

    def point(self, x, y, **options):
        return self._record('point', (x, y), options)

    def line(self, x, y, **options):
        return self._record('line', (x, y), options)

    def bar(self, values, **options):
        return self._record('bar', (values,), options)

    def column(self, values, **options):
        return self._record('column', (values,), options)


@pytest.fixture
def engine():
    """Install a RecordingEngine as the default engine for one test."""

    recording = RecordingEngine()
    previous = set_default_engine(recording)
    yield recording
    set_default_engine(previous)


@pytest.fixture(autouse=True)
def _fresh_defaults():
    """Every test starts and ends with the built-in engine defaults."""

    chartbridge.reset_defaults()
    yield
    chartbridge.reset_defaults()
