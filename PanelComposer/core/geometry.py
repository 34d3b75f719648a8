#!/usr/bin/env python3
"""
Geometry helpers: fraction normalisation, margins and cell domains.

All positions are in *paper* coordinates: 0..1 on both axes, x growing to
the right and y growing upwards (plotly's convention).  Rows are laid out
top-down, so row 0 owns the highest y range.
"""

import math
import warnings
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from PanelComposer.core.errors import InvalidLayout, NegativeFraction

DEFAULT_MARGIN = 0.02
FRACTION_TOLERANCE = 1e-9
# largest share of a slot a fitted margin may take on each side
FIT_MARGIN_SHARE = 0.1


@dataclass(frozen=True)
class Margin:
    """
    Space removed from each side of every cell.

    A *fit* margin is shrunk to at most ``FIT_MARGIN_SHARE`` of a slot on
    each side, so small cells never collapse.  Margins given explicitly are
    applied as-is.
    """
    left: float = DEFAULT_MARGIN
    right: float = DEFAULT_MARGIN
    top: float = DEFAULT_MARGIN
    bottom: float = DEFAULT_MARGIN
    fit: bool = False

    @classmethod
    def from_value(cls, value, fit: bool = False) -> 'Margin':
        """
        Build a Margin from a scalar, a (left, right, top, bottom) sequence
        or another Margin.  ``None`` gives the default fit margin.
        """
        if value is None:
            return cls(fit=True)
        if isinstance(value, Margin):
            return value
        if isinstance(value, (list, tuple, np.ndarray)):
            if len(value) != 4:
                raise InvalidLayout(
                    f"margin needs 1 or 4 values (left, right, top, bottom), "
                    f"got {len(value)}"
                )
            sides = [_as_float(v, 'margin') for v in value]
        else:
            sides = [_as_float(value, 'margin')] * 4

        for side in sides:
            if side < 0 or not math.isfinite(side):
                raise InvalidLayout(f"margin must be finite and >= 0, got {side}")
        return cls(*sides, fit=fit)

    def to_list(self) -> List[float]:
        return [self.left, self.right, self.top, self.bottom]

    def sides_for(self, width: float, height: float) -> Tuple[float, float, float, float]:
        """(left, right, top, bottom) to remove from a *width* x *height* slot."""
        if not self.fit:
            return self.left, self.right, self.top, self.bottom
        max_x = FIT_MARGIN_SHARE * width
        max_y = FIT_MARGIN_SHARE * height
        return (min(self.left, max_x), min(self.right, max_x),
                min(self.top, max_y), min(self.bottom, max_y))


@dataclass(frozen=True)
class Domain:
    """A rectangle in paper coordinates."""
    x0: float
    x1: float
    y0: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def within(self, outer: 'Domain') -> 'Domain':
        """Map this domain (relative to a unit square) into *outer*."""
        return Domain(
            x0=outer.x0 + self.x0 * outer.width,
            x1=outer.x0 + self.x1 * outer.width,
            y0=outer.y0 + self.y0 * outer.height,
            y1=outer.y0 + self.y1 * outer.height,
        )

    def as_rect(self) -> Tuple[float, float, float, float]:
        """(left, bottom, width, height), as ``Figure.add_axes`` expects."""
        return (self.x0, self.y0, self.width, self.height)

    def to_dict(self) -> dict:
        return {'x': [self.x0, self.x1], 'y': [self.y0, self.y1]}


UNIT_DOMAIN = Domain(0.0, 1.0, 0.0, 1.0)


# ---------------------------------------------------------------------------
# fractions
# ---------------------------------------------------------------------------

def _as_float(value, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidLayout(f"{what} must be numeric, got {value!r}") from None


def as_sequence(values, what: str) -> list:
    """Return *values* as a list, or raise InvalidLayout for a scalar."""
    try:
        return list(values)
    except TypeError:
        raise InvalidLayout(f"{what} must be a sequence, got {values!r}") from None


def normalize_fractions(values: Optional[Sequence[float]], count: int,
                        what: str = "fractions") -> Tuple[float, ...]:
    """
    Validate *values* and scale them so they sum to 1.

    ``None`` gives *count* equal shares.  Values already summing to 1 are
    returned as given; anything else is rescaled with a warning.
    """
    if values is None:
        return tuple([1.0 / count] * count)

    values = as_sequence(values, what)
    if len(values) != count:
        raise InvalidLayout(f"{what} has {len(values)} entries, expected {count}")

    arr = np.array([_as_float(v, what) for v in values], dtype=float)
    bad = ~np.isfinite(arr) | (arr <= 0)
    if bad.any():
        raise NegativeFraction(
            f"{what} must be positive and finite, got {arr[bad].tolist()}"
        )

    total = float(arr.sum())
    if abs(total - 1.0) > FRACTION_TOLERANCE:
        warnings.warn(f"{what} sum to {total:.4g}; normalizing to 1.")
        arr = arr / total
    return tuple(float(v) for v in arr)


# ---------------------------------------------------------------------------
# domains
# ---------------------------------------------------------------------------

def cell_domains(heights: Sequence[float],
                 widths: Sequence[Sequence[float]],
                 margin: Margin) -> List[List[Domain]]:
    """
    Compute one Domain per cell.

    Parameters
    ----------
    heights : sequence of float
        Normalised row heights, top row first.
    widths : sequence of sequence of float
        Normalised cell widths for every row.
    margin : Margin
        Removed from each side of every cell slot.  A fit margin is capped
        per slot and never raises.

    Raises
    ------
    InvalidLayout
        If an explicit margin leaves no room for a cell.
    """
    row_edges = np.concatenate([[0.0], np.cumsum(heights)])
    domains = []
    for r, row_widths in enumerate(widths):
        top = 1.0 - row_edges[r]
        bottom = 1.0 - row_edges[r + 1]
        col_edges = np.concatenate([[0.0], np.cumsum(row_widths)])

        row_domains = []
        for c in range(len(row_widths)):
            left, right, top_gap, bottom_gap = margin.sides_for(
                col_edges[c + 1] - col_edges[c], top - bottom)
            dom = Domain(
                x0=float(col_edges[c] + left),
                x1=float(col_edges[c + 1] - right),
                y0=float(bottom + bottom_gap),
                y1=float(top - top_gap),
            )
            if dom.width <= 0 or dom.height <= 0:
                raise InvalidLayout(
                    f"margin {margin.to_list()} leaves no room for the cell at "
                    f"row {r + 1}, column {c + 1}"
                )
            row_domains.append(dom)
        domains.append(row_domains)
    return domains
