#!/usr/bin/env python3
"""
Error kinds raised while composing an Arrangement.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can catch that.
"""


class LayoutError(ValueError):
    """Base class for every composition error."""


class EmptyInput(LayoutError):
    """No panels were supplied."""


class InvalidLayout(LayoutError):
    """Row/column/fraction counts or margins are inconsistent."""


class NegativeFraction(InvalidLayout):
    """A height or width fraction is zero, negative, or not finite."""
