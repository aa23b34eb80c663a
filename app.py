from dataclasses import dataclass
from typing import Optional

import streamlit as st

from knight_tour.driver import TourReport, run_tour
from knight_tour.moves import BOARD_SIZE
from knight_tour.renderer.text import COLUMN_LABELS
from knight_tour.renderer.texture import TextureRenderer
from knight_tour.utils.tour import square_name

st.set_page_config(layout="wide", page_title="Knight's Tour")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


@dataclass(frozen=True)
class TourConfig:
    row: int
    col: int
    seed: Optional[int]
    step_limit: Optional[int]
    resolution: int
    show_path: bool


def get_config_from_widgets() -> TourConfig:
    st.subheader("Start Square")
    col_label = st.selectbox("Column", list(COLUMN_LABELS[:BOARD_SIZE]), index=0)
    row = st.number_input("Row", min_value=1, max_value=BOARD_SIZE, value=1, step=1)
    st.subheader("Search")
    seed = st.number_input("Seed (fallback only)", min_value=0, value=0, step=1)
    limit_enabled = st.checkbox("Bound fallback steps", value=True)
    step_limit = (
        st.number_input("Step limit", min_value=1, value=200_000, step=10_000)
        if limit_enabled
        else None
    )
    st.subheader("Display")
    resolution = st.slider("Resolution", min_value=256, max_value=1024, value=512, step=64)
    show_path = st.checkbox("Show path", value=True)
    return TourConfig(
        row=int(row) - 1,
        col=COLUMN_LABELS.index(col_label),
        seed=int(seed),
        step_limit=int(step_limit) if step_limit is not None else None,
        resolution=resolution,
        show_path=show_path,
    )


@st.cache_data(show_spinner=False)
def cached_tour(
    row: int, col: int, seed: Optional[int], step_limit: Optional[int]
) -> TourReport:
    return run_tour(row, col, seed=seed, step_limit=step_limit)


# --------- Main App ---------

with st.sidebar:
    config = get_config_from_widgets()

with st.spinner("Searching..."):
    report = cached_tour(config.row, config.col, config.seed, config.step_limit)

if report.solved:
    st.success(
        f"Tour from **{square_name(report.start)}** found by **{report.winning_strategy}**."
    )
else:
    st.error(f"No complete tour found from **{square_name(report.start)}**.")

renderer = TextureRenderer(resolution=config.resolution, show_path=config.show_path)
columns = st.columns(len(report.attempts))
for column, attempt in zip(columns, report.attempts):
    with column:
        st.info(f"**{attempt.strategy}**: {'solved' if attempt.success else 'failed'}")
        st.image(renderer.render(attempt.grid), use_container_width=True)

st.json(report.description, expanded=1)
