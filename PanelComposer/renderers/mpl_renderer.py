#!/usr/bin/env python3
"""
Matplotlib renderer.

Each leaf panel becomes one Axes placed with ``Figure.add_axes`` at the
leaf's domain rectangle.  Panel content must be a callable taking the Axes
(``content(ax)``); plotly content cannot be drawn here and is skipped with
a warning.

Shared groups are linked with ``Axes.sharex`` / ``Axes.sharey`` before any
content is drawn.
"""

import warnings
from typing import Dict, Tuple

from PanelComposer.core.arrangement import Arrangement
from PanelComposer.renderers.base import BaseRenderer


class MatplotlibRenderer(BaseRenderer):
    """Render an Arrangement into a matplotlib Figure."""

    backend = "matplotlib"

    def render(self, arrangement: Arrangement, fig=None, **kwargs):
        """
        Parameters
        ----------
        arrangement : Arrangement
        fig : matplotlib Figure, optional
            Target figure.  A new one is created when None.
        **kwargs
            ``figsize`` (default (10, 6) for a new figure; resizes a given
            one) and ``title``.

        Returns
        -------
        fig : matplotlib Figure
        """
        fig, _ = self.render_axes(arrangement, fig=fig, **kwargs)
        return fig

    def render_axes(self, arrangement: Arrangement, fig=None,
                    **kwargs) -> Tuple[object, Dict[str, object]]:
        """Like ``render`` but also return ``{leaf location: Axes}``."""
        figsize = kwargs.pop('figsize', None)
        if fig is None:
            import matplotlib.pyplot as plt
            fig = plt.figure(figsize=figsize or (10, 6))
        elif figsize is not None:
            fig.set_size_inches(figsize)

        leaves = arrangement.leaves()
        owners = {'x': {}, 'y': {}}
        axes = []

        for leaf in leaves:
            ax = fig.add_axes(leaf.domain.as_rect())
            for axis, group in (('x', leaf.x_group), ('y', leaf.y_group)):
                if group is None:
                    continue
                if group in owners[axis]:
                    share = ax.sharex if axis == 'x' else ax.sharey
                    share(owners[axis][group])
                else:
                    owners[axis][group] = ax
            axes.append(ax)

        for leaf, ax in zip(leaves, axes):
            self._draw(leaf, ax)

        keep_x = self._outer_members(leaves, 'x_group')
        keep_y = self._outer_members(leaves, 'y_group')
        for i, (leaf, ax) in enumerate(zip(leaves, axes)):
            if leaf.x_group is not None and keep_x[leaf.x_group] != i:
                ax.tick_params(labelbottom=False)
            if leaf.y_group is not None and keep_y[leaf.y_group] != i:
                ax.tick_params(labelleft=False)

        if kwargs.get('title'):
            fig.suptitle(kwargs['title'])
        return fig, {leaf.location: ax for leaf, ax in zip(leaves, axes)}

    @staticmethod
    def _draw(leaf, ax):
        panel = leaf.panel
        content = panel.content
        if callable(content):
            content(ax)
        elif content is not None:
            warnings.warn(
                f"Matplotlib renderer cannot draw {type(content).__name__} "
                f"content of panel '{panel.panel_id}'; left empty."
            )

        if panel.title:
            ax.set_title(panel.title, fontsize=13)
        if not leaf.title_x:
            ax.set_xlabel("")
        elif panel.x_title:
            ax.set_xlabel(panel.x_title, fontsize=12)
        if not leaf.title_y:
            ax.set_ylabel("")
        elif panel.y_title:
            ax.set_ylabel(panel.y_title, fontsize=12)
