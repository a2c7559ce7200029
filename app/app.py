"""Streamlit page for band achievement cards.

Sheet loading, grouping and the interaction state live in
``src/band_achievements``; this module lays out widgets and forwards every
widget callback to the controller kept in the session.
"""

import locale
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from app.sample_data import load_sample_csv  # noqa: E402
from app.ui.helpers import download_df, style_fig  # noqa: E402
from app.ui.shell import AppShell, kpi_row, section_header  # noqa: E402
from band_achievements.config import Settings  # noqa: E402
from band_achievements.controller import AchievementsController, LoadStatus  # noqa: E402
from band_achievements.grouping import StudentAggregate, leader, students_frame  # noqa: E402
from band_achievements.io import fetch_sheet_csv  # noqa: E402
from band_achievements.overlay import BackgroundActivated, ImageActivated, OutsideActivated  # noqa: E402
from band_achievements.plots import leaderboard_bar  # noqa: E402
from band_achievements.render import ImageRef, build_card_views, card_html, error_html, image_html, list_assets, notice_html  # noqa: E402
from band_achievements.security import escape_html, escape_markdown  # noqa: E402
from band_achievements.views import SORT_MODES  # noqa: E402

st.set_page_config(page_title="Band Achievements", layout="wide", page_icon="🎺")

SETTINGS = Settings.from_env()
logging.basicConfig(level=SETTINGS.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("band_achievements.app")

SORT_LABELS = {"points": "Most points", "name": "Name (A-Z)", "cards": "Most cards"}
ZOOM_COLUMNS = 6


def _set_collation_locale() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.info("Using default collation, system locale unavailable: %s", exc)


def _controller() -> AchievementsController:
    if "controller" not in st.session_state:
        st.session_state["controller"] = AchievementsController()
    return st.session_state["controller"]


def _init_state() -> None:
    defaults = {
        "search": "",
        "sort": "points",
        "sheet_id": SETTINGS.sheet_id,
        "gid": SETTINGS.gid,
        "demo_mode": False,
        "reload_requested": True,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


def _close_overlay() -> None:
    _controller().dispatch(OutsideActivated())


def _on_search_change() -> None:
    _controller().set_search(st.session_state["search"])
    _close_overlay()


def _on_sort_change() -> None:
    _controller().set_sort(st.session_state["sort"])
    _close_overlay()


def _request_reload() -> None:
    st.session_state["reload_requested"] = True
    _close_overlay()


def _fetcher() -> Optional[Callable[[], str]]:
    if st.session_state["demo_mode"]:
        return load_sample_csv
    sheet_id = st.session_state["sheet_id"].strip()
    if not sheet_id:
        return None
    return partial(fetch_sheet_csv, sheet_id, st.session_state["gid"], timeout=SETTINGS.request_timeout)


def _maybe_load(controller: AchievementsController) -> None:
    if not st.session_state.get("reload_requested"):
        return
    st.session_state["reload_requested"] = False
    fetch = _fetcher()
    if fetch is None:
        st.warning("Enter a spreadsheet id in the sidebar, or turn on demo data.")
        return
    with st.spinner("Loading sheet..."):
        controller.load(fetch)


@st.dialog("Achievement card", width="large")
def _zoom_dialog(src: str, alt: str) -> None:
    st.markdown(image_html(ImageRef(src=src, alt=alt), css_class="zoom-image glow"), unsafe_allow_html=True)
    if alt:
        st.text(alt)
    if st.button("Close", key="overlay-close", use_container_width=True):
        _controller().dispatch(BackgroundActivated())
        st.rerun()


def _render_sidebar() -> None:
    st.sidebar.header("Sheet")
    st.sidebar.toggle("Demo data", key="demo_mode", on_change=_request_reload, help="Use the bundled sample sheet instead of the network")
    st.sidebar.text_input("Spreadsheet id", key="sheet_id", on_change=_request_reload, disabled=st.session_state["demo_mode"])
    st.sidebar.text_input("Tab gid", key="gid", on_change=_request_reload, disabled=st.session_state["demo_mode"])
    st.sidebar.button("Reload", on_click=_request_reload, use_container_width=True)


def _render_status(controller: AchievementsController) -> None:
    state = controller.state
    if state.status is LoadStatus.ERROR:
        st.markdown(error_html(state.message), unsafe_allow_html=True)
    elif state.status is LoadStatus.NO_DATA:
        st.markdown(notice_html(state.message), unsafe_allow_html=True)


def _render_summary(all_students: List[StudentAggregate], students: List[StudentAggregate]) -> None:
    top = leader(all_students)
    kpi_row(
        [
            {"label": "Students", "value": len(students)},
            {"label": "Cards earned", "value": sum(s.card_count for s in students)},
            {"label": "Total points", "value": f"{sum(s.total for s in students):,.0f}"},
            {"label": "Leader", "value": escape_html(top.name) if top else "-", "hint": "most points"},
        ]
    )


def _render_cards(controller: AchievementsController, students: List[StudentAggregate]) -> None:
    generation = controller.next_generation()
    views = build_card_views(students, list_assets(SETTINGS.asset_dir), SETTINGS.asset_url)
    for s_idx, view in enumerate(views):
        with st.container(border=True):
            st.markdown(card_html(view), unsafe_allow_html=True)
            if not view.images:
                continue
            cols = st.columns(min(len(view.images), ZOOM_COLUMNS))
            for i_idx, image in enumerate(view.images):
                with cols[i_idx % len(cols)]:
                    st.button(
                        f"🔍 {escape_markdown(image.alt) or 'Card'}",
                        key=f"zoom-{s_idx}-{i_idx}",
                        on_click=controller.dispatch,
                        args=(ImageActivated(src=image.src, alt=image.alt, generation=generation),),
                        use_container_width=True,
                    )


def main():
    _set_collation_locale()
    _init_state()
    controller = _controller()

    shell = AppShell("Band Achievements", "Achievement cards earned this season")
    shell.header(right="Demo data" if st.session_state["demo_mode"] else "Live sheet")

    _render_sidebar()
    _maybe_load(controller)

    left, right = st.columns([0.7, 0.3])
    with left:
        st.text_input("Search students", key="search", on_change=_on_search_change, placeholder="Type a name")
    with right:
        st.selectbox("Sort by", options=SORT_MODES, format_func=SORT_LABELS.get, key="sort", on_change=_on_sort_change)

    _render_status(controller)
    students = controller.display_list()

    if controller.state.students:
        _render_summary(controller.state.students, students)
        with st.expander("Leaderboard chart"):
            frame = students_frame(students)
            st.plotly_chart(style_fig(leaderboard_bar(frame)), use_container_width=True)
            download_df("Download standings CSV", frame, "band_achievements.csv", on_click=_close_overlay)

    section_header("Students")
    if controller.state.students and not students:
        st.info("No students match the search.")
    _render_cards(controller, students)

    overlay = controller.state.overlay
    if overlay.is_open:
        _zoom_dialog(overlay.src, overlay.alt)


if __name__ == "__main__":
    main()
