#!/usr/bin/env python3
"""
Composer – arrange panels (or nested arrangements) into a grid.

``compose`` is a pure function: it validates its inputs, decides which
panel lands in which cell, assigns sizes and shared-axis groups, and returns
a new Arrangement.  Nothing passed in is modified.

Distribution rule
-----------------
Panels fill rows left-to-right, top-to-bottom, in index order.  With N
panels and R rows every row gets ``N // R`` panels; the ``N % R`` panels
left over go one each to the bottom rows:

    compose([p1, p2, p3, p4], rows=2)  ->  [[p1, p2], [p3, p4]]
    compose([p1, p2, p3], rows=2)      ->  [[p1], [p2, p3]]

A nested Arrangement counts as one panel and keeps its own structure, which
is how "merged cell" layouts (rows with different column counts) are built.
"""

import numbers
from typing import List, Optional, Sequence, Union

from PanelComposer.core.arrangement import Arrangement, Cell, Row
from PanelComposer.core.errors import EmptyInput, InvalidLayout
from PanelComposer.core.geometry import (
    Margin, as_sequence, cell_domains, normalize_fractions,
)
from PanelComposer.core.panel import as_panel, is_arrangement, is_panel

WidthSpec = Union[Sequence[float], Sequence[Sequence[float]]]


def compose(panels: Sequence,
            rows: int = 1,
            heights: Optional[Sequence[float]] = None,
            widths: Optional[WidthSpec] = None,
            share_x: bool = False,
            share_y: bool = False,
            margin=None,
            title_x: bool = True,
            title_y: bool = True,
            panel_id: Optional[str] = None) -> Arrangement:
    """
    Compose panels into an Arrangement.

    Parameters
    ----------
    panels : sequence
        Panels, Arrangements, plotly figures, trace lists or drawing
        callables.  Raw objects are wrapped as ``Panel("panel<i>")``.
    rows : int
        Number of grid rows.
    heights : sequence of float, optional
        One positive fraction per row.  Equal shares when omitted.
    widths : sequence, optional
        Either one positive fraction per column (every row must then have
        that many columns) or one such sequence per row.
    share_x, share_y : bool
        Tag cells in the same column (x) or row (y) with a common axis group.
        Panels whose own ``share_x`` / ``share_y`` flag is False are skipped.
    margin : float or (left, right, top, bottom), optional
        Paper-coordinate space removed around every cell.  When omitted,
        ``DEFAULT_MARGIN`` is used but shrunk to fit small cells.
    title_x, title_y : bool
        Whether renderers keep the panels' axis titles.
    panel_id : str, optional
        Identifier of the result when used as a panel itself.

    Returns
    -------
    Arrangement

    Raises
    ------
    EmptyInput
        If *panels* is empty.
    InvalidLayout
        Bad row count, mismatched fraction lengths, duplicate panel ids or
        an explicit margin that leaves no room.
    NegativeFraction
        A height or width is not positive.

    Examples
    --------
    >>> grid = compose([p1, p2, p3, p4], rows=2, share_x=True)
    >>> grid.columns_per_row
    (2, 2)
    >>> outer = compose([grid, p5], rows=2, heights=[0.7, 0.3])
    """
    items = [as_panel(p, i + 1) for i, p in enumerate(panels or [])]
    if not items:
        raise EmptyInput("compose() needs at least one panel")

    if isinstance(rows, bool) or not isinstance(rows, numbers.Integral) or rows <= 0:
        raise InvalidLayout(f"rows must be a positive integer, got {rows!r}")
    if rows > len(items):
        raise InvalidLayout(
            f"cannot spread {len(items)} panel(s) over {rows} rows"
        )

    _check_unique_ids(items)

    grid = _distribute(items, rows)
    row_heights = normalize_fractions(heights, rows, "heights")
    row_widths = _resolve_widths(widths, [len(r) for r in grid])
    margin = Margin.from_value(margin)

    # fail now rather than at render time
    cell_domains(row_heights, row_widths, margin)

    built_rows = []
    for r, (row_items, height, width_row) in enumerate(zip(grid, row_heights, row_widths)):
        cells = []
        for c, (item, width) in enumerate(zip(row_items, width_row)):
            cells.append(Cell(
                item=item,
                width=width,
                x_group=f"x{c + 1}" if share_x and _joins(item, 'share_x') else None,
                y_group=f"y{r + 1}" if share_y and _joins(item, 'share_y') else None,
            ))
        built_rows.append(Row(cells=tuple(cells), height=height))

    if panel_id is None:
        panel_id = "arrangement(" + ",".join(i.panel_id for i in items) + ")"

    return Arrangement(
        rows=tuple(built_rows),
        margin=margin,
        share_x=share_x,
        share_y=share_y,
        title_x=title_x,
        title_y=title_y,
        panel_id=panel_id,
    )


def stack(*panels, **kwargs) -> Arrangement:
    """Compose panels vertically, one per row."""
    return compose(panels, rows=len(panels) or 1, **kwargs)


def side_by_side(*panels, **kwargs) -> Arrangement:
    """Compose panels horizontally in a single row."""
    return compose(panels, rows=1, **kwargs)


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _distribute(items: list, rows: int) -> List[list]:
    """Split *items* into *rows* rows; extra panels go to the bottom rows."""
    base, extra = divmod(len(items), rows)
    counts = [base + (1 if r >= rows - extra else 0) for r in range(rows)]

    grid, start = [], 0
    for n in counts:
        grid.append(items[start:start + n])
        start += n
    return grid


def _resolve_widths(widths, columns_per_row: List[int]):
    """Return one normalised width tuple per row."""
    if widths is None:
        return [normalize_fractions(None, n) for n in columns_per_row]

    widths = as_sequence(widths, "widths")
    per_row = bool(widths) and all(hasattr(w, "__len__") for w in widths)
    if per_row:
        if len(widths) != len(columns_per_row):
            raise InvalidLayout(
                f"widths has {len(widths)} rows, grid has {len(columns_per_row)}"
            )
        return [normalize_fractions(w, n, f"widths of row {r + 1}")
                for r, (w, n) in enumerate(zip(widths, columns_per_row))]

    if len(set(columns_per_row)) != 1:
        raise InvalidLayout(
            f"a flat widths list needs the same column count in every row, "
            f"got {columns_per_row}; pass one widths list per row instead"
        )
    row_widths = normalize_fractions(widths, columns_per_row[0], "widths")
    return [row_widths] * len(columns_per_row)


def _check_unique_ids(items: list):
    """Leaf panels need distinct ids; nested arrangements may repeat."""
    seen = set()
    for item in items:
        if not is_panel(item):
            continue
        if item.panel_id in seen:
            raise InvalidLayout(f"duplicate panel id '{item.panel_id}'")
        seen.add(item.panel_id)


def _joins(item, flag: str) -> bool:
    """Whether *item* takes part in axis sharing at this level."""
    if is_arrangement(item):
        return True
    return bool(getattr(item, flag, True))
