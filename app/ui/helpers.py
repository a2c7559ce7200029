from __future__ import annotations

import re
from typing import Optional

import streamlit as st

_KEY_RE = re.compile(r"[^A-Za-z0-9._-]+")


def _key(prefix: str, name: str) -> str:
    return f"{prefix}:{_KEY_RE.sub('_', name)}"


def download_df(label: str, df, filename: str, mime: str = "text/csv", on_click=None) -> None:
    """Render a download button for a dataframe with a deterministic key."""
    if df is None or df.empty:
        st.caption("Nothing to download yet.")
        return
    st.download_button(
        label=label,
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=filename,
        mime=mime,
        key=_key("dl", filename),
        use_container_width=False,
        on_click=on_click,
    )


def style_fig(fig, title: Optional[str] = None):
    fig.update_layout(
        title=title or fig.layout.title.text,
        margin=dict(t=60, r=24, b=40, l=24),
        template="plotly_dark",
        plot_bgcolor="#0b1220",
        paper_bgcolor="#0b1220",
        font=dict(family="Inter, sans-serif", color="#e5e7eb", size=12),
        hoverlabel=dict(bgcolor="#111827", font_size=12),
    )
    return fig
