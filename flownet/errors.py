"""Error kinds raised by flownet.

All errors derive from ``FlowNetError`` and also from the closest built-in
exception, so callers catching ``ValueError`` or ``KeyError`` keep working.
"""

from __future__ import annotations


class FlowNetError(Exception):
    """Base class for all flownet errors."""


class NotFoundError(FlowNetError, KeyError):
    """A vertex or arc id lookup failed."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages.
        return str(self.args[0]) if self.args else ""


class DuplicateIdError(FlowNetError, ValueError):
    """A vertex or arc id is already in use."""


class InvalidArgumentError(FlowNetError, ValueError):
    """An argument is outside of its allowed range."""


class MalformedNetworkError(FlowNetError, ValueError):
    """An arc has no paired reverse arc."""


class NoAugmentingPathError(FlowNetError, RuntimeError):
    """No flow could be pushed between source and target.

    Only raised when zero flow is configured to be an error.
    """
