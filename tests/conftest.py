"""Pytest configuration and shared fixtures."""

from hypothesis import settings

# Create a profile named "no_deadline" with deadline disabled.
#
# Pure Python block generation is slow enough to trip the default deadline
# on large examples.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
