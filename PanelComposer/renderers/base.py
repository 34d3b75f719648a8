#!/usr/bin/env python3
"""
BaseRenderer – abstract base class for every rendering backend.

Renderers are *stateless*: they receive a finished Arrangement and turn it
into a figure of their plotting library.  They never change the
Arrangement and know nothing about how it was composed.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from PanelComposer.core.arrangement import Arrangement, Leaf


class BaseRenderer(ABC):
    """Abstract base for arrangement renderers."""

    backend: str      # e.g. "plotly"

    @abstractmethod
    def render(self, arrangement: Arrangement, **kwargs):
        """
        Draw every leaf panel of *arrangement* in its domain.

        Parameters
        ----------
        arrangement : Arrangement
            The (possibly nested) grid to draw.
        **kwargs
            Backend-specific figure options (title, size, ...).

        Returns
        -------
        A figure object of the backend's library.
        """
        ...

    # ------------------------------------------------------------------
    # shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _outer_members(leaves: List[Leaf], attr: str) -> Dict[str, int]:
        """
        For every axis group, the index of the leaf whose tick labels stay
        visible: the lowest panel for x groups, the leftmost for y groups.
        """
        keep: Dict[str, int] = {}
        for i, leaf in enumerate(leaves):
            group = getattr(leaf, attr)
            if group is None:
                continue
            if group not in keep:
                keep[group] = i
                continue
            current = leaves[keep[group]].domain
            if attr == 'x_group' and leaf.domain.y0 < current.y0:
                keep[group] = i
            elif attr == 'y_group' and leaf.domain.x0 < current.x0:
                keep[group] = i
        return keep
