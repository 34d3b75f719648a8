#!/usr/bin/env python3
"""
PanelComposer Layout Preview - try row/height/width/sharing settings live.

Run with:
    streamlit run PanelComposer/web_app/Home.py

Or use console command:
    panelcomposer-preview [port]
"""

import json

import streamlit as st

from PanelComposer import InvalidLayout, LayoutError, compose
from PanelComposer.simulations import make_demo_panels

st.set_page_config(
    page_title="PanelComposer",
    page_icon="📐",
    layout="wide",
    initial_sidebar_state="expanded"
)

# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def parse_fractions(text):
    """Parse '0.2, 0.8' into a list of floats; empty text means None."""
    text = text.strip()
    if not text:
        return None
    try:
        return [float(v) for v in text.split(",") if v.strip()]
    except ValueError:
        raise InvalidLayout(f"Could not parse fractions from '{text}'") from None


# ---------------------------------------------------------------------------
# Sidebar: layout parameters
# ---------------------------------------------------------------------------

st.title("📐 PanelComposer")
st.markdown("### Compose demo panels into a grid and inspect the result")

with st.sidebar:
    st.header("⚙️ Layout")
    n_panels = st.slider("Number of panels", 2, 9, 4)
    n_rows = st.slider("Rows", 1, n_panels, min(2, n_panels))
    heights_text = st.text_input("Row heights (comma separated)", "",
                                 help="Leave empty for equal heights")
    widths_text = st.text_input("Column widths (comma separated)", "",
                                help="Only valid when every row has the same column count")
    margin = st.number_input("Margin", min_value=0.0, max_value=0.2,
                             value=0.02, step=0.01)
    share_x = st.checkbox("Share x-axes (per column)", value=False)
    share_y = st.checkbox("Share y-axes (per row)", value=False)
    title_x = st.checkbox("Keep x-axis titles", value=True)
    title_y = st.checkbox("Keep y-axis titles", value=True)

    st.header("🧩 Nesting")
    nest = st.checkbox("Place the grid next to an extra panel", value=False)
    outer_width = st.slider("Grid width share", 0.2, 0.9, 0.7, disabled=not nest)

# ---------------------------------------------------------------------------
# Compose + render
# ---------------------------------------------------------------------------

panels = make_demo_panels(n_panels + (1 if nest else 0))
try:
    arrangement = compose(
        panels[:n_panels],
        rows=n_rows,
        heights=parse_fractions(heights_text),
        widths=parse_fractions(widths_text),
        share_x=share_x,
        share_y=share_y,
        margin=margin,
        title_x=title_x,
        title_y=title_y,
        panel_id="grid",
    )
    if nest:
        arrangement = compose([arrangement, panels[-1]],
                              widths=[outer_width, 1 - outer_width],
                              margin=0.0, panel_id="page")
except LayoutError as e:
    st.error(f"❌ {type(e).__name__}: {e}")
    st.stop()

fig = arrangement.render("plotly", height=650, showlegend=False)
st.plotly_chart(fig, use_container_width=True)

col1, col2 = st.columns([2, 1])
with col1:
    st.subheader("📋 Cells")
    st.dataframe(arrangement.to_frame(), use_container_width=True)
with col2:
    st.subheader("🔗 Shared axes")
    st.json({'x': arrangement.x_groups(), 'y': arrangement.y_groups()})

st.download_button(
    label="💾 Layout JSON",
    data=json.dumps(arrangement.to_dict(), indent=2),
    file_name="arrangement.json",
    mime="application/json",
)
