"""Streamlit preview app for PanelComposer layouts."""
