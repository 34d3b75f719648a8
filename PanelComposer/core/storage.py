#!/usr/bin/env python3
"""
JSON persistence for arrangements.

Only the layout and JSON-safe panel content (plotly figures and traces)
survive a round trip; drawing callables are dropped.
"""

import json
from pathlib import Path
from typing import Union

from PanelComposer.core.arrangement import Arrangement


def save_arrangement(arrangement: Arrangement, path: Union[str, Path]) -> Path:
    """Write *arrangement* to *path* as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(arrangement.to_dict(), f, indent=2)
    print(f"  ✓ Saved arrangement '{arrangement.panel_id}' to: {path}")
    return path


def load_arrangement(path: Union[str, Path]) -> Arrangement:
    """Read an arrangement written by ``save_arrangement``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No arrangement file at {path}")

    with open(path, 'r') as f:
        data = json.load(f)
    arrangement = Arrangement.from_dict(data)
    print(f"✓ Loaded arrangement '{arrangement.panel_id}' "
          f"({len(arrangement.leaves())} panels)")
    return arrangement
