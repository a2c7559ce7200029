from __future__ import annotations

import string
from typing import Iterable, Optional

import streamlit as st

PRIMARY = "#2563eb"
SURFACE = "#0b1220"
SURFACE_ALT = "#111827"
BORDER = "#1f2937"
TEXT = "#e5e7eb"
MUTED = "#9ca3af"
ACCENT = "#22d3ee"
SUCCESS = "#22c55e"
WARNING = "#f59e0b"
ERROR = "#ef4444"

TIER_COLORS = {
    "blue": "#3b82f6",
    "gold": "#facc15",
    "silver": "#cbd5e1",
    "bronze": "#d97706",
}

CSS_TEMPLATE = """
<style>
:root {
    --primary: $PRIMARY;
    --surface: $SURFACE;
    --surface-alt: $SURFACE_ALT;
    --border: $BORDER;
    --text: $TEXT;
    --muted: $MUTED;
    --accent: $ACCENT;
    --error: $ERROR;
    --radius-lg: 18px;
    --radius-md: 12px;
    --shadow-1: 0 12px 40px rgba(0,0,0,0.35);
}

html, body, [class^="css"], .stApp {
    background: radial-gradient(circle at 20% 20%, rgba(34,211,238,0.07), transparent 30%),
                radial-gradient(circle at 80% 10%, rgba(37,99,235,0.07), transparent 30%),
                var(--surface);
    color: var(--text);
    font-family: 'Inter', 'SF Pro Display', 'Segoe UI', system-ui, -apple-system, sans-serif;
}

section.main .block-container {
    padding: 1.5rem 2.2rem 2rem 2.2rem;
    max-width: 1400px;
}

.app-pill {
    display: inline-flex;
    align-items: center;
    gap: 0.5rem;
    padding: 0.35rem 0.65rem;
    border-radius: 999px;
    font-size: 0.78rem;
    border: 1px solid rgba(255,255,255,0.08);
    background: rgba(255,255,255,0.05);
    color: var(--text);
}

.app-kpi {
    background: linear-gradient(135deg, rgba(37,99,235,0.12), rgba(34,211,238,0.1));
    border: 1px solid rgba(255,255,255,0.08);
    border-radius: var(--radius-md);
    padding: 0.9rem 1rem;
}
.app-kpi .label { color: $MUTED; font-size: 0.85rem; margin-bottom: 0.25rem; }
.app-kpi .value { font-size: 1.4rem; font-weight: 700; }

/* Student cards */
.student-card {
    background: linear-gradient(145deg, rgba(255,255,255,0.03), rgba(255,255,255,0.01));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: var(--radius-lg);
    padding: 1rem 1.1rem;
    box-shadow: var(--shadow-1);
    margin-bottom: 0.4rem;
}
.student-card.glow-blue { box-shadow: 0 0 22px $GLOW_BLUE; border-color: $GLOW_BLUE; }
.student-card.glow-gold { box-shadow: 0 0 18px $GLOW_GOLD; border-color: $GLOW_GOLD; }
.student-card.glow-silver { box-shadow: 0 0 14px $GLOW_SILVER; border-color: $GLOW_SILVER; }
.student-card.glow-bronze { box-shadow: 0 0 10px $GLOW_BRONZE; border-color: $GLOW_BRONZE; }
.student-card .student-name { font-weight: 700; font-size: 1.15rem; }
.student-card .points { margin: 0.35rem 0 0.6rem 0; }
.student-card .points .label { color: $MUTED; font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.04em; }
.student-card .points .num { font-size: 1.8rem; font-weight: 800; color: $ACCENT; }
.cards-container { display: flex; flex-wrap: wrap; gap: 0.45rem; }
img.achievement-card {
    width: 72px;
    height: 100px;
    object-fit: cover;
    border-radius: 8px;
    border: 1px solid rgba(255,255,255,0.1);
}
img.zoom-image { width: 100%; border-radius: var(--radius-md); }
img.zoom-image.glow { box-shadow: 0 0 40px rgba(34,211,238,0.45); }

.load-error { color: crimson; }
.load-notice { color: var(--muted); }

/* Sidebar */
section[data-testid="stSidebar"] {
    background: linear-gradient(180deg, rgba(17,24,39,0.95), rgba(17,24,39,0.8));
    border-right: 1px solid rgba(255,255,255,0.05);
}

/* Buttons */
button[kind="primary"], .stButton>button {
    border-radius: 999px;
    border: 1px solid rgba(255,255,255,0.1);
    background: linear-gradient(120deg, $PRIMARY, $ACCENT);
    color: white;
    font-weight: 600;
}

.small-muted { color: var(--muted); font-size: 0.9rem; }
.section-header { display: flex; align-items: center; gap: 0.5rem; font-weight: 700; font-size: 1.05rem; margin-bottom: 0.35rem; }
</style>
"""

GLOBAL_CSS = string.Template(CSS_TEMPLATE).safe_substitute(
    {
        "PRIMARY": PRIMARY,
        "SURFACE": SURFACE,
        "SURFACE_ALT": SURFACE_ALT,
        "BORDER": BORDER,
        "TEXT": TEXT,
        "MUTED": MUTED,
        "ACCENT": ACCENT,
        "ERROR": ERROR,
        "GLOW_BLUE": TIER_COLORS["blue"],
        "GLOW_GOLD": TIER_COLORS["gold"],
        "GLOW_SILVER": TIER_COLORS["silver"],
        "GLOW_BRONZE": TIER_COLORS["bronze"],
    }
)


def muted(text: str):
    st.markdown(f"<div class='small-muted'>{text}</div>", unsafe_allow_html=True)


def pill(label: str, tone: str = "info"):
    colors = {"info": ACCENT, "success": SUCCESS, "warning": WARNING, "danger": ERROR}
    st.markdown(
        f"<span class='app-pill' style='border-color:{colors.get(tone, ACCENT)}; color:{TEXT};'>● {label}</span>",
        unsafe_allow_html=True,
    )


def kpi_row(items: Iterable[dict]):
    items = list(items)
    cols = st.columns(len(items)) if items else []
    for col, item in zip(cols, items):
        with col:
            st.markdown(
                f"""
                <div class='app-kpi'>
                    <div class='label'>{item.get('label','')}</div>
                    <div class='value'>{item.get('value','-')}</div>
                    <div class='small-muted'>{item.get('hint','')}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )


def section_header(title: str, description: Optional[str] = None):
    st.markdown(f"<div class='section-header'>{title}</div>", unsafe_allow_html=True)
    if description:
        muted(description)


class AppShell:
    def __init__(self, title: str, subtitle: Optional[str] = None):
        self.title = title
        self.subtitle = subtitle
        self._inject_css()

    @staticmethod
    def _inject_css():
        st.markdown(GLOBAL_CSS, unsafe_allow_html=True)

    def header(self, right: Optional[str] = None):
        left, right_col = st.columns([0.8, 0.2])
        with left:
            st.title(self.title)
            if self.subtitle:
                muted(self.subtitle)
        if right:
            with right_col:
                st.markdown("<div style='display:flex; justify-content:flex-end'>", unsafe_allow_html=True)
                pill(right)
                st.markdown("</div>", unsafe_allow_html=True)
