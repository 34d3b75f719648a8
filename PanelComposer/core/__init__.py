"""Core module: panels, arrangements, geometry and the composer."""

from PanelComposer.core.errors import (
    LayoutError, EmptyInput, InvalidLayout, NegativeFraction,
)
from PanelComposer.core.panel import Panel, as_panel, is_arrangement, is_panel
from PanelComposer.core.geometry import Margin, Domain, normalize_fractions
from PanelComposer.core.arrangement import Arrangement, Row, Cell, Leaf
from PanelComposer.core.composer import compose, stack, side_by_side
from PanelComposer.core.storage import save_arrangement, load_arrangement

__all__ = [
    'LayoutError', 'EmptyInput', 'InvalidLayout', 'NegativeFraction',
    'Panel', 'as_panel', 'is_arrangement', 'is_panel',
    'Margin', 'Domain', 'normalize_fractions',
    'Arrangement', 'Row', 'Cell', 'Leaf',
    'compose', 'stack', 'side_by_side',
    'save_arrangement', 'load_arrangement',
]
