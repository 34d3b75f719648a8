#!/usr/bin/env python3
"""
PanelComposer: arrange interactive plots into composite layouts.

Takes a sequence of plots (or already composed grids) and produces one
Arrangement describing row/column placement, relative sizes and shared
axes.  Arrangements nest, so a composed grid can fill a single cell of
another one ("subplots of subplots").

Main Components
---------------
compose : The composer
    Distributes panels into rows, sizes them, links shared axes
Panel : Leaf visual unit
    Identifier, content (plotly figure / traces / drawing callable), flags
Arrangement : Composed grid
    Immutable; usable as a panel of another Arrangement

Renderers
---------
PlotlyRenderer : one plotly Figure with an axis pair per panel
MatplotlibRenderer : one matplotlib Figure with an Axes per panel

Utilities
---------
save_arrangement / load_arrangement : JSON persistence
stack / side_by_side : one-column and one-row shortcuts

Basic Usage
-----------
>>> import plotly.graph_objects as go
>>> from PanelComposer import Panel, compose
>>>
>>> p1 = Panel("uvvis", go.Figure(go.Scatter(x=[1, 2, 3], y=[3, 1, 2])))
>>> p2 = Panel("saxs", go.Figure(go.Scatter(x=[1, 2, 3], y=[1, 2, 4])))
>>> p3 = Panel("waxs", go.Figure(go.Bar(x=["a", "b"], y=[2, 5])))
>>>
>>> # p1 on top, p2 and p3 below it, x-axes linked per column
>>> grid = compose([p1, p2, p3], rows=2, heights=[0.3, 0.7], share_x=True)
>>> grid.describe()
>>>
>>> # Nest it next to another panel
>>> page = compose([grid, Panel("dls")], widths=[0.75, 0.25])
>>> fig = page.render("plotly", height=600)
"""

from PanelComposer.version import __version__

__author__ = "PanelComposer Team"

from PanelComposer.core.errors import (
    LayoutError, EmptyInput, InvalidLayout, NegativeFraction,
)
from PanelComposer.core.panel import Panel, as_panel, is_arrangement
from PanelComposer.core.geometry import Margin, Domain
from PanelComposer.core.arrangement import Arrangement, Row, Cell, Leaf
from PanelComposer.core.composer import compose, stack, side_by_side
from PanelComposer.core.storage import save_arrangement, load_arrangement

from PanelComposer.renderers import (
    PlotlyRenderer, MatplotlibRenderer, RENDERER_REGISTRY, get_renderer,
)


# Define public API
__all__ = [
    # Composer
    'compose',
    'stack',
    'side_by_side',

    # Data model
    'Panel',
    'Arrangement',
    'Row',
    'Cell',
    'Leaf',
    'Margin',
    'Domain',
    'as_panel',
    'is_arrangement',

    # Errors
    'LayoutError',
    'EmptyInput',
    'InvalidLayout',
    'NegativeFraction',

    # Renderers
    'PlotlyRenderer',
    'MatplotlibRenderer',
    'RENDERER_REGISTRY',
    'get_renderer',

    # Utilities
    'save_arrangement',
    'load_arrangement',
]


# Package information
def get_version():
    """Get package version."""
    return __version__


def get_info():
    """Get package information."""
    return {
        'name': 'PanelComposer',
        'version': __version__,
        'description': 'Compose plots into nested, axis-linked grid layouts',
        'author': __author__,
    }
