import streamlit as st

from ..config import UISettings

PALETTES = {
    "light": {
        "background": "#FFFFFF",
        "surface": "#F9FAFB",
        "border": "#E5E7EB",
        "text": "#111827",
        "muted": "#6B7280",
        "accent": "#2563EB",
    },
    "dark": {
        "background": "#0F172A",
        "surface": "#1E293B",
        "border": "#334155",
        "text": "#F8FAFC",
        "muted": "#94A3B8",
        "accent": "#60A5FA",
    },
}

CHART_TEMPLATES = {"light": "plotly_white", "dark": "plotly_dark"}


def chart_template(settings: UISettings) -> str:
    return CHART_TEMPLATES.get(settings.theme, "plotly_white")


def theme_css(settings: UISettings) -> str:
    p = PALETTES.get(settings.theme, PALETTES["light"])
    return f"""
<style>
.stApp {{ background-color: {p["background"]}; color: {p["text"]}; }}
.block-container {{ padding: 1.5rem 2rem; max-width: 1200px; margin: auto; }}
section[data-testid="stSidebar"] {{ background-color: {p["surface"]}; border-right: 1px solid {p["border"]}; }}
h1, h2, h3, h4, label, p {{ color: {p["text"]}; }}
.stCaption {{ color: {p["muted"]}; }}
div[data-testid="stMetric"] {{
    background: {p["surface"]};
    border-radius: 12px;
    padding: 1rem;
    border: 1px solid {p["border"]};
}}
div.stPlotlyChart {{ border-radius: 12px; border: 1px solid {p["border"]}; padding: 0.5rem; }}
button[kind="primary"] {{ background-color: {p["accent"]}; border: none; border-radius: 8px; }}
#MainMenu {{visibility: hidden;}}
footer {{visibility: hidden;}}
</style>
"""


def inject_theme(settings: UISettings):
    st.markdown(theme_css(settings), unsafe_allow_html=True)
