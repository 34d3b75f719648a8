#!/usr/bin/env python3
"""
Walkthrough: composing, nesting, saving and rendering arrangements.

Writes its output to ./PanelComposerDemo/ in the current directory.
"""

from pathlib import Path

from PanelComposer import (
    compose, stack, side_by_side,
    save_arrangement, load_arrangement,
    EmptyInput, InvalidLayout,
)
from PanelComposer.simulations import make_demo_panels

out_dir = Path("./PanelComposerDemo")

print("=" * 70)
print("  PANELCOMPOSER DEMO")
print("=" * 70)

# ============================================================================
# STEP 1: A plain 2 x 2 grid
# ============================================================================
print("\n1. Composing four panels into two rows...")

p1, p2, p3, p4, p5 = make_demo_panels(5)
grid = compose([p1, p2, p3, p4], rows=2, share_x=True)
grid.describe()

# ============================================================================
# STEP 2: Uneven rows with custom heights
# ============================================================================
print("\n2. Three panels, one on top and two below...")

uneven = compose([p1, p2, p3], rows=2, heights=[0.2, 0.8])
print(f"   Columns per row: {uneven.columns_per_row}")
print(f"   Heights:         {uneven.heights}")

# ============================================================================
# STEP 3: Nesting ("subplots of subplots")
# ============================================================================
print("\n3. Nesting the grid next to a tall panel...")

column = stack(p1, p2, share_x=True, panel_id="left")
page = side_by_side(column, compose([p3, p4, p5], rows=1, panel_id="right"),
                    widths=[0.4, 0.6], margin=0.0, panel_id="page")
page.describe()
print(page.to_frame()[['panel_id', 'location', 'x0', 'x1', 'y0', 'y1']])

# ============================================================================
# STEP 4: Errors are raised up front
# ============================================================================
print("\n4. Invalid inputs...")

for label, kwargs in [("empty", dict(panels=[])),
                      ("zero rows", dict(panels=[p1], rows=0)),
                      ("bad heights", dict(panels=[p1, p2], rows=2, heights=[1.0]))]:
    try:
        compose(**kwargs)
    except (EmptyInput, InvalidLayout) as e:
        print(f"   ✓ {label}: {type(e).__name__}: {e}")

# ============================================================================
# STEP 5: Save, reload and render
# ============================================================================
print("\n5. Saving and rendering...")

path = save_arrangement(page, out_dir / "page.json")
reloaded = load_arrangement(path)
assert reloaded.columns_per_row == page.columns_per_row

fig = reloaded.render("plotly", title="Nested layout", height=700)
html_path = out_dir / "page.html"
fig.write_html(html_path, include_plotlyjs="cdn")
print(f"   ✓ Interactive figure: {html_path}")

mpl_panels = make_demo_panels(4, backend="matplotlib")
mpl_fig = compose(mpl_panels, rows=2, share_y=True, margin=0.06).render(
    "matplotlib", figsize=(10, 7), title="Matplotlib rendering")
png_path = out_dir / "grid.png"
mpl_fig.savefig(png_path, dpi=150)
print(f"   ✓ Static figure: {png_path}")

print("\n" + "=" * 70)
print("  DONE")
print("=" * 70)
