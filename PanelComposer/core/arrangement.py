#!/usr/bin/env python3
"""
Arrangement – an immutable grid of panels.

Structure
---------
    Arrangement
      rows  : tuple of Row          (top to bottom)
        Row.height : float          (row heights sum to 1)
        Row.cells  : tuple of Cell  (left to right)
          Cell.width   : float      (cell widths in a row sum to 1)
          Cell.item    : Panel | Arrangement
          Cell.x_group : str | None (shared x-axis id, "x<column>")
          Cell.y_group : str | None (shared y-axis id, "y<row>")

An Arrangement carries a ``panel_id`` and can therefore sit in a cell of
another Arrangement.  Values are never modified after construction; build a
new one with ``compose`` instead.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from PanelComposer.core.errors import InvalidLayout
from PanelComposer.core.geometry import (
    FRACTION_TOLERANCE, UNIT_DOMAIN, Domain, Margin, cell_domains,
)
from PanelComposer.core.panel import Panel, is_arrangement


@dataclass(frozen=True)
class Cell:
    """One grid slot holding a Panel or a nested Arrangement."""
    item: object
    width: float
    x_group: Optional[str] = None
    y_group: Optional[str] = None

    @property
    def is_nested(self) -> bool:
        return is_arrangement(self.item)

    def to_dict(self) -> dict:
        return {
            'width': self.width,
            'x_group': self.x_group,
            'y_group': self.y_group,
            'item': self.item.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Cell':
        item_data = data['item']
        if item_data.get('kind') == 'arrangement':
            item = Arrangement.from_dict(item_data)
        else:
            item = Panel.from_dict(item_data)
        return cls(item=item, width=data['width'],
                   x_group=data.get('x_group'), y_group=data.get('y_group'))


@dataclass(frozen=True)
class Row:
    """A horizontal band of cells."""
    cells: Tuple[Cell, ...]
    height: float

    def __post_init__(self):
        object.__setattr__(self, 'cells', tuple(self.cells))

    @property
    def items(self) -> tuple:
        return tuple(c.item for c in self.cells)


@dataclass(frozen=True)
class Leaf:
    """A Panel located in the flattened grid (see ``Arrangement.leaves``)."""
    panel: Panel
    path: Tuple[Tuple[int, int], ...]
    domain: Domain
    x_group: Optional[str]
    y_group: Optional[str]
    title_x: bool
    title_y: bool

    @property
    def location(self) -> str:
        return "/".join(f"r{r + 1}c{c + 1}" for r, c in self.path)


@dataclass(frozen=True)
class Arrangement:
    """A composed grid of panels with sizing and axis-sharing metadata."""
    rows: Tuple[Row, ...]
    margin: Margin = Margin(fit=True)
    share_x: bool = False
    share_y: bool = False
    title_x: bool = True
    title_y: bool = True
    panel_id: str = "arrangement"

    def __post_init__(self):
        object.__setattr__(self, 'rows', tuple(self.rows))
        if not self.rows or any(not row.cells for row in self.rows):
            raise InvalidLayout("an arrangement needs at least one cell per row")

        if not math.isclose(sum(self.heights), 1.0, abs_tol=FRACTION_TOLERANCE * 10):
            raise InvalidLayout(f"row heights sum to {sum(self.heights)}, not 1")
        for r, row_widths in enumerate(self.widths):
            if not math.isclose(sum(row_widths), 1.0, abs_tol=FRACTION_TOLERANCE * 10):
                raise InvalidLayout(
                    f"widths in row {r + 1} sum to {sum(row_widths)}, not 1"
                )

    # ------------------------------------------------------------------
    # shape
    # ------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def columns_per_row(self) -> Tuple[int, ...]:
        return tuple(len(row.cells) for row in self.rows)

    @property
    def heights(self) -> Tuple[float, ...]:
        return tuple(row.height for row in self.rows)

    @property
    def widths(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(tuple(c.width for c in row.cells) for row in self.rows)

    @property
    def panels(self) -> tuple:
        """Top-level items (Panels and nested Arrangements) in index order."""
        return tuple(cell.item for row in self.rows for cell in row.cells)

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(row_index, column_index, cell)`` top-down, left-to-right."""
        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row.cells):
                yield r, c, cell

    def cell(self, row: int, column: int) -> Cell:
        try:
            return self.rows[row].cells[column]
        except IndexError:
            raise IndexError(
                f"no cell at row {row}, column {column} "
                f"(grid shape {list(self.columns_per_row)})"
            ) from None

    # ------------------------------------------------------------------
    # axis groups
    # ------------------------------------------------------------------

    def x_groups(self) -> Dict[str, List[str]]:
        """``{group_id: [item ids]}`` for shared x-axes at this level."""
        return self._groups('x_group')

    def y_groups(self) -> Dict[str, List[str]]:
        """``{group_id: [item ids]}`` for shared y-axes at this level."""
        return self._groups('y_group')

    def _groups(self, attr: str) -> Dict[str, List[str]]:
        groups: Dict[str, List[str]] = {}
        for _, _, cell in self.iter_cells():
            group = getattr(cell, attr)
            if group is not None:
                groups.setdefault(group, []).append(cell.item.panel_id)
        return groups

    # ------------------------------------------------------------------
    # geometry
    # ------------------------------------------------------------------

    def domains(self) -> List[List[Domain]]:
        """One Domain per cell, in paper coordinates of this arrangement."""
        return cell_domains(self.heights, self.widths, self.margin)

    def leaves(self, outer: Domain = UNIT_DOMAIN,
               path: Tuple[Tuple[int, int], ...] = ()) -> List[Leaf]:
        """
        Flatten nested arrangements into a list of positioned Panels.

        Nested domains are mapped into their enclosing cell.  Axis groups are
        prefixed with the location of the arrangement that assigned them
        (``"r2c1/x1"``), so groups from different nesting levels never merge.
        """
        prefix = "/".join(f"r{r + 1}c{c + 1}" for r, c in path)
        prefix = prefix + "/" if prefix else ""

        result: List[Leaf] = []
        domains = self.domains()
        for r, c, cell in self.iter_cells():
            dom = domains[r][c].within(outer)
            cell_path = path + ((r, c),)
            if cell.is_nested:
                result.extend(cell.item.leaves(outer=dom, path=cell_path))
                continue
            result.append(Leaf(
                panel=cell.item,
                path=cell_path,
                domain=dom,
                x_group=prefix + cell.x_group if cell.x_group else None,
                y_group=prefix + cell.y_group if cell.y_group else None,
                title_x=self.title_x,
                title_y=self.title_y,
            ))
        return result

    # ------------------------------------------------------------------
    # serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        """JSON-safe dict of the whole (possibly nested) grid."""
        return {
            'kind': 'arrangement',
            'panel_id': self.panel_id,
            'margin': self.margin.to_list(),
            'fit_margin': self.margin.fit,
            'share_x': self.share_x,
            'share_y': self.share_y,
            'title_x': self.title_x,
            'title_y': self.title_y,
            'rows': [
                {'height': row.height, 'cells': [c.to_dict() for c in row.cells]}
                for row in self.rows
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Arrangement':
        rows = tuple(
            Row(cells=tuple(Cell.from_dict(c) for c in row['cells']),
                height=row['height'])
            for row in data['rows']
        )
        return cls(
            rows=rows,
            margin=Margin.from_value(data.get('margin'),
                                     fit=data.get('fit_margin', False)),
            share_x=data.get('share_x', False),
            share_y=data.get('share_y', False),
            title_x=data.get('title_x', True),
            title_y=data.get('title_y', True),
            panel_id=data.get('panel_id', 'arrangement'),
        )

    def to_frame(self):
        """pandas DataFrame with one row per leaf panel."""
        import pandas as pd

        records = []
        for leaf in self.leaves():
            r, c = leaf.path[-1]
            records.append({
                'panel_id': leaf.panel.panel_id,
                'location': leaf.location,
                'depth': len(leaf.path) - 1,
                'row': r,
                'column': c,
                'x0': leaf.domain.x0,
                'x1': leaf.domain.x1,
                'y0': leaf.domain.y0,
                'y1': leaf.domain.y1,
                'x_group': leaf.x_group,
                'y_group': leaf.y_group,
            })
        columns = ['panel_id', 'location', 'depth', 'row', 'column',
                   'x0', 'x1', 'y0', 'y1', 'x_group', 'y_group']
        return pd.DataFrame.from_records(records, columns=columns)

    # ------------------------------------------------------------------
    # convenience
    # ------------------------------------------------------------------

    def describe(self, indent: int = 0):
        """Print the grid structure."""
        pad = "  " * indent
        shape = " x ".join(str(n) for n in self.columns_per_row)
        print(f"{pad}✓ Arrangement '{self.panel_id}': {self.n_rows} rows [{shape}]")
        for r, row in enumerate(self.rows):
            print(f"{pad}  row {r + 1} (height {row.height:.3f})")
            for cell in row.cells:
                groups = ", ".join(g for g in (cell.x_group, cell.y_group) if g)
                suffix = f"  [{groups}]" if groups else ""
                if cell.is_nested:
                    print(f"{pad}    - nested (width {cell.width:.3f}){suffix}")
                    cell.item.describe(indent=indent + 3)
                else:
                    print(f"{pad}    - {cell.item.panel_id} "
                          f"(width {cell.width:.3f}){suffix}")

    def render(self, backend: str = "plotly", **kwargs):
        """
        Render with one of the registered backends.

        Keeps ``arrangement.render()`` short while the drawing logic lives in
        ``PanelComposer.renderers``.
        """
        from PanelComposer.renderers import get_renderer
        return get_renderer(backend).render(self, **kwargs)
