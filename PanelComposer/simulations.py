#!/usr/bin/env python3
"""Synthetic demo panels for examples, the preview app and tests."""

import numpy as np
from typing import List, Tuple

from PanelComposer.core.panel import Panel

DEMO_KINDS = ["line", "scatter", "bar", "histogram"]


def simulate_series(kind: str, n_points: int = 100,
                    seed: int = 0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return ``(x, y)`` arrays for one demo panel.

    line      – damped oscillation
    scatter   – noisy linear trend
    bar       – a handful of category counts (x = 0..n-1)
    histogram – normal samples in *y*, *x* unused (empty)
    """
    rng = np.random.default_rng(seed)
    if kind == "line":
        x = np.linspace(0, 10, n_points)
        y = np.exp(-0.25 * x) * np.cos(2 * x)
    elif kind == "scatter":
        x = np.sort(rng.uniform(0, 10, n_points))
        y = 0.8 * x + rng.normal(0, 1.0, n_points)
    elif kind == "bar":
        x = np.arange(6)
        y = rng.integers(1, 20, size=6)
    elif kind == "histogram":
        x = np.array([])
        y = rng.normal(0, 1, n_points)
    else:
        raise ValueError(f"Unknown demo kind '{kind}'. Available: {DEMO_KINDS}")
    return x, y


def make_demo_panels(n: int, backend: str = "plotly", seed: int = 0) -> List[Panel]:
    """
    Build *n* panels cycling through DEMO_KINDS.

    ``backend="plotly"`` gives plotly figures as content,
    ``backend="matplotlib"`` gives drawing callables.
    """
    panels = []
    for i in range(n):
        kind = DEMO_KINDS[i % len(DEMO_KINDS)]
        x, y = simulate_series(kind, seed=seed + i)
        if backend == "plotly":
            content = _plotly_content(kind, x, y, name=f"{kind} {i + 1}")
        elif backend in ("matplotlib", "mpl"):
            content = _mpl_content(kind, x, y)
        else:
            raise ValueError(f"Unknown backend '{backend}'")
        panels.append(Panel(panel_id=f"{kind}{i + 1}", content=content,
                            title=f"{kind.title()} {i + 1}",
                            x_title="x", y_title="y"))
    return panels


def _plotly_content(kind, x, y, name):
    import plotly.graph_objects as go

    if kind == "line":
        trace = go.Scatter(x=x, y=y, mode="lines", name=name)
    elif kind == "scatter":
        trace = go.Scatter(x=x, y=y, mode="markers", name=name)
    elif kind == "bar":
        trace = go.Bar(x=x, y=y, name=name)
    else:
        trace = go.Histogram(x=y, name=name)
    return go.Figure(trace)


def _mpl_content(kind, x, y):
    def draw(ax):
        if kind == "line":
            ax.plot(x, y, '-', linewidth=2)
        elif kind == "scatter":
            ax.plot(x, y, 'o', markersize=4)
        elif kind == "bar":
            ax.bar(x, y)
        else:
            ax.hist(y, bins=20)
        ax.grid(True, alpha=0.3)
    return draw
