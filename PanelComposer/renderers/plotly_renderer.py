#!/usr/bin/env python3
"""
Plotly renderer.

Every leaf panel gets its own axis pair (``xaxis``, ``xaxis2``, ...) whose
domain is the leaf's domain.  Traces from the panel content are copied and
re-anchored to that pair, so the source figures are left untouched.

Shared axis groups become plotly ``matches`` links: the first member of a
group owns the axis, the others match it.  Only the lowest panel of an x
group (leftmost of a y group) keeps its tick labels.

Non-cartesian traces are placed by domain:

    3-D traces      – own ``scene<k>``
    geo traces      – own ``geo<k>``
    polar/ternary   – own ``polar<k>`` / ``ternary<k>``
    pie, sunburst … – ``trace.domain``
"""

import warnings
from typing import Dict, List, Optional

import plotly.graph_objects as go

from PanelComposer.core.arrangement import Arrangement, Leaf
from PanelComposer.core.panel import is_plotly_figure, is_trace_list
from PanelComposer.renderers.base import BaseRenderer

# axis keys that describe placement; the arrangement owns them
_PLACEMENT_KEYS = ('domain', 'anchor', 'matches', 'overlaying', 'position',
                   'scaleanchor')

_SUBPLOT_LAYOUTS = {
    'scatterpolar':   'polar',
    'scatterpolargl': 'polar',
    'barpolar':       'polar',
    'scatterternary': 'ternary',
}


class PlotlyRenderer(BaseRenderer):
    """Render an Arrangement into a single plotly Figure."""

    backend = "plotly"

    def render(self, arrangement: Arrangement, title: Optional[str] = None,
               height: Optional[int] = None, width: Optional[int] = None,
               showlegend: Optional[bool] = None, **kwargs) -> go.Figure:
        leaves = arrangement.leaves()
        fig = go.Figure()

        layout: Dict[str, dict] = {}
        annotations: List[dict] = []
        axis_owner = {'x': {}, 'y': {}}       # group -> axis ref ("x3")
        has_axes = set()                      # leaf indices with cartesian axes

        for i, leaf in enumerate(leaves):
            suffix = "" if i == 0 else str(i + 1)
            content = leaf.panel.content
            traces = _traces_of(content)

            cartesian = not traces or any(hasattr(t, 'xaxis') for t in traces)
            if cartesian:
                has_axes.add(i)
                for axis in ('x', 'y'):
                    layout[f"{axis}axis{suffix}"] = self._axis_layout(
                        leaf, content, axis, suffix, axis_owner[axis])

            for trace in traces:
                spec = self._place_trace(trace, leaf, content, suffix, layout)
                if spec is not None:
                    fig.add_trace(spec)

            if leaf.panel.title:
                annotations.append(_title_annotation(leaf))

        self._hide_inner_ticks(leaves, has_axes, layout)

        fig.update_layout(**layout)
        if annotations:
            fig.update_layout(annotations=annotations)
        figure_opts = {'title': title, 'height': height, 'width': width,
                       'showlegend': showlegend}
        figure_opts.update(kwargs)
        fig.update_layout(**{k: v for k, v in figure_opts.items() if v is not None})
        return fig

    # ------------------------------------------------------------------
    # axes
    # ------------------------------------------------------------------

    def _axis_layout(self, leaf: Leaf, content, axis: str, suffix: str,
                     owners: Dict[str, str]) -> dict:
        props = {}
        if is_plotly_figure(content):
            props = dict(getattr(content.layout, f"{axis}axis").to_plotly_json())
        for key in _PLACEMENT_KEYS:
            props.pop(key, None)

        if axis == 'x':
            props['domain'] = [leaf.domain.x0, leaf.domain.x1]
            props['anchor'] = f"y{suffix}"
            keep_title, explicit, group = leaf.title_x, leaf.panel.x_title, leaf.x_group
        else:
            props['domain'] = [leaf.domain.y0, leaf.domain.y1]
            props['anchor'] = f"x{suffix}"
            keep_title, explicit, group = leaf.title_y, leaf.panel.y_title, leaf.y_group

        if not keep_title:
            props.pop('title', None)
        elif explicit:
            props['title'] = {'text': explicit}

        if group is not None:
            if group in owners:
                props['matches'] = owners[group]
            else:
                owners[group] = f"{axis}{suffix}"
        return props

    def _hide_inner_ticks(self, leaves: List[Leaf], has_axes: set, layout: dict):
        indices = sorted(has_axes)
        with_axes = [leaves[i] for i in indices]
        for axis, attr in (('x', 'x_group'), ('y', 'y_group')):
            keep = self._outer_members(with_axes, attr)
            for j, i in enumerate(indices):
                group = getattr(leaves[i], attr)
                if group is not None and keep[group] != j:
                    suffix = "" if i == 0 else str(i + 1)
                    layout[f"{axis}axis{suffix}"]['showticklabels'] = False

    # ------------------------------------------------------------------
    # traces
    # ------------------------------------------------------------------

    def _place_trace(self, trace, leaf: Leaf, content, suffix: str,
                     layout: dict) -> Optional[dict]:
        spec = dict(trace.to_plotly_json())
        dom = {'x': [leaf.domain.x0, leaf.domain.x1],
               'y': [leaf.domain.y0, leaf.domain.y1]}

        if hasattr(trace, 'xaxis'):
            spec['xaxis'] = f"x{suffix}"
            spec['yaxis'] = f"y{suffix}"
            return spec

        for attr in ('scene', 'geo'):
            if hasattr(trace, attr):
                spec[attr] = f"{attr}{suffix}"
                layout[f"{attr}{suffix}"] = _subplot_layout(content, attr, dom)
                return spec

        base = _SUBPLOT_LAYOUTS.get(spec.get('type'))
        if base is not None:
            spec['subplot'] = f"{base}{suffix}"
            layout[f"{base}{suffix}"] = _subplot_layout(content, base, dom)
            return spec

        if hasattr(trace, 'domain'):
            spec['domain'] = dom
            return spec

        warnings.warn(
            f"Cannot place {spec.get('type')} trace of panel "
            f"'{leaf.panel.panel_id}'; skipped."
        )
        return None


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _traces_of(content) -> list:
    if is_plotly_figure(content):
        return list(content.data)
    if is_trace_list(content):
        return list(content)
    if content is not None:
        warnings.warn(f"Plotly renderer ignores {type(content).__name__} content.")
    return []


def _subplot_layout(content, name: str, dom: dict) -> dict:
    props = {}
    if is_plotly_figure(content):
        props = dict(getattr(content.layout, name).to_plotly_json())
    props['domain'] = dom
    return props


def _title_annotation(leaf: Leaf) -> dict:
    """Panel title centred above its domain, like make_subplots titles."""
    return dict(
        text=leaf.panel.title,
        x=(leaf.domain.x0 + leaf.domain.x1) / 2,
        y=leaf.domain.y1,
        xref='paper',
        yref='paper',
        xanchor='center',
        yanchor='bottom',
        showarrow=False,
        font=dict(size=14),
    )
