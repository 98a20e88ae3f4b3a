"""Errors raised while loading portfolio content."""

from __future__ import annotations


class LoadError(Exception):
    """Base class for content load problems."""


class FragmentUnavailable(LoadError):
    """A single fragment could not be fetched or parsed."""

    def __init__(self, fragment: str, reason: str = ""):
        self.fragment = fragment
        self.reason = reason
        msg = f"fragment '{fragment}' unavailable"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class LoadFailed(LoadError):
    """The whole load failed; ``cause`` is the fragment error that triggered it."""

    def __init__(self, cause: FragmentUnavailable):
        self.cause = cause
        super().__init__(f"content load failed ({cause})")

    @property
    def fragment(self) -> str:
        return self.cause.fragment
