"""Exceptions for addonpack."""

from __future__ import annotations


class AddonPackError(Exception):
    """Base class for addonpack errors."""


class MalformedTreeError(AddonPackError):
    """Raised when an attribute tree cannot be parsed into typed nodes.

    Carries the relative path of the offending node so the upstream producer
    can be pointed at the broken entry.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path or '<root>'}: {reason}")


class TreeDepthError(MalformedTreeError):
    """Raised when a tree nests deeper than the configured limit."""

    def __init__(self, path: str, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(path, f"tree deeper than {max_depth} levels")
