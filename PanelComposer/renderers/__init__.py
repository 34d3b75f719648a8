"""
Rendering backends.

RENDERER_REGISTRY maps a backend name to its renderer class.
``"mpl"`` is an alias of ``"matplotlib"``.
"""

from PanelComposer.renderers.base import BaseRenderer
from PanelComposer.renderers.plotly_renderer import PlotlyRenderer
from PanelComposer.renderers.mpl_renderer import MatplotlibRenderer

RENDERER_REGISTRY = {
    'plotly':     PlotlyRenderer,
    'matplotlib': MatplotlibRenderer,
    'mpl':        MatplotlibRenderer,
}


def get_renderer(backend: str) -> BaseRenderer:
    """Instantiate the renderer registered under *backend*."""
    if backend not in RENDERER_REGISTRY:
        raise ValueError(
            f"Unknown backend '{backend}'. "
            f"Available: {sorted(RENDERER_REGISTRY)}"
        )
    return RENDERER_REGISTRY[backend]()


__all__ = [
    'BaseRenderer', 'PlotlyRenderer', 'MatplotlibRenderer',
    'RENDERER_REGISTRY', 'get_renderer',
]
