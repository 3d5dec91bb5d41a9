"""Exceptions raised by LazyPost outside the event loop."""


class LazyPostError(Exception):
    """Base class for LazyPost errors."""


class StartupError(LazyPostError):
    """The application cannot start, e.g. a bundled asset is missing."""
