"""Pytest configuration and shared fixtures."""

from hypothesis import settings

# Hypothesis examples that sign run without a per-example deadline.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
