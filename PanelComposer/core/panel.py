#!/usr/bin/env python3
"""
Panel – the leaf visual unit placed in one grid cell.

A Panel only carries an identifier, its (opaque) content and a few flags.
Content is whatever a renderer knows how to draw:

    plotly figure          – traces + axis settings are copied into the cell
    list of plotly traces  – traces are copied into the cell
    callable(ax)           – invoked with a matplotlib Axes
    None                   – an empty cell

Arrangements are accepted wherever a Panel is; the two are told apart by
``is_arrangement`` (a capability check, not a common base class).
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Panel:
    """A single visual unit."""
    panel_id: str
    content: Any = field(default=None, compare=False, repr=False)
    title: str = ""
    share_x: bool = True
    share_y: bool = True
    x_title: str = ""
    y_title: str = ""

    def to_dict(self) -> dict:
        """JSON-safe dict. Callable content is dropped."""
        return {
            'kind': 'panel',
            'panel_id': self.panel_id,
            'title': self.title,
            'share_x': self.share_x,
            'share_y': self.share_y,
            'x_title': self.x_title,
            'y_title': self.y_title,
            'content': _content_to_dict(self.content),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Panel':
        data = dict(data)
        data.pop('kind', None)
        content = _content_from_dict(data.pop('content', None))
        return cls(content=content, **data)


# ---------------------------------------------------------------------------
# capability checks
# ---------------------------------------------------------------------------

def is_arrangement(obj) -> bool:
    """True for anything that behaves like a composed Arrangement."""
    return hasattr(obj, 'rows') and callable(getattr(obj, 'iter_cells', None))


def is_panel(obj) -> bool:
    """True for leaf panels (anything with a ``panel_id`` that is not nested)."""
    return hasattr(obj, 'panel_id') and not is_arrangement(obj)


def is_plotly_figure(obj) -> bool:
    return (hasattr(obj, 'data') and hasattr(obj, 'layout')
            and callable(getattr(obj, 'to_json', None)))


def is_trace_list(obj) -> bool:
    return (isinstance(obj, (list, tuple)) and len(obj) > 0
            and all(callable(getattr(t, 'to_plotly_json', None)) for t in obj))


def item_id(item) -> str:
    """Identifier of a Panel or an Arrangement."""
    return item.panel_id


def as_panel(obj, index: int):
    """
    Return *obj* unchanged if it is a Panel or Arrangement, otherwise wrap it.

    Raw plotly figures, trace lists and drawing callables become a Panel
    named ``panel<index>`` (1-based); a plotly figure's layout title is reused
    as the panel title.
    """
    if is_arrangement(obj) or is_panel(obj):
        return obj

    title = ""
    if is_plotly_figure(obj):
        layout_title = getattr(obj.layout.title, 'text', None)
        title = layout_title or ""
    elif not (is_trace_list(obj) or callable(obj) or obj is None):
        raise TypeError(
            f"Cannot use {type(obj).__name__} as a panel. Expected a Panel, an "
            f"Arrangement, a plotly figure, a list of traces or a callable."
        )
    return Panel(panel_id=f"panel{index}", content=obj, title=title)


# ---------------------------------------------------------------------------
# content serialisation
# ---------------------------------------------------------------------------

def _content_to_dict(content) -> Optional[dict]:
    if is_plotly_figure(content):
        return {'kind': 'plotly_figure', 'figure': json.loads(content.to_json())}
    if is_trace_list(content):
        import plotly.graph_objects as go
        fig = go.Figure(data=list(content))
        return {'kind': 'plotly_traces', 'traces': json.loads(fig.to_json())['data']}
    return None


def _content_from_dict(data: Optional[dict]):
    if not data:
        return None

    import plotly.graph_objects as go
    kind = data.get('kind')
    if kind == 'plotly_figure':
        return go.Figure(data['figure'])
    if kind == 'plotly_traces':
        return list(go.Figure(data=data['traces']).data)
    raise ValueError(f"Unknown panel content kind '{kind}'")
