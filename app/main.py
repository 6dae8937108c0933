import streamlit as st

from typing import Dict

from strategic_defense.components import Position
from strategic_defense.report import AnalysisReport, build_report
from strategic_defense.renderer.board import BoardRenderer
from strategic_defense.session import GameSession
from strategic_defense.state import State
from strategic_defense.types import CellType, Phase
from strategic_defense.utils.grid import display_cell
from strategic_defense.utils.logger import configure_logging

CELL_GLYPHS: Dict[CellType, str] = {
    CellType.EMPTY: "·",
    CellType.START: "🚩",
    CellType.END: "🏰",
    CellType.TOWER: "🗼",
    CellType.ENEMY: "👾",
}

PHASE_TEXT: Dict[Phase, str] = {
    Phase.SETUP: "📍 Setup Phase: Place your towers strategically!",
    Phase.BATTLE: "⚔️ Battle Phase: AI executing optimal strategy!",
    Phase.FINISHED: "💥 Battle Complete",
}

st.set_page_config(layout="wide", page_title="Strategic Defense")


# --------- Session ---------

if "session" not in st.session_state:
    configure_logging()
    st.session_state["session"] = GameSession()
    st.session_state["placing_tower"] = False

session: GameSession = st.session_state["session"]
renderer = BoardRenderer(resolution=640)


def show_stats(report: AnalysisReport) -> None:
    st.metric("Towers placed", report.towers_placed)
    st.metric("Paths analyzed", report.paths_analyzed)
    st.metric(
        "Best path",
        f"{report.best_path_length} moves" if report.best_path_length else "-",
    )
    st.metric("AI success rate", f"{report.success_rate}%")


def show_strategy(report: AnalysisReport) -> None:
    st.subheader("AI Strategy")
    if report.difficulty is None:
        st.write("Waiting for tower placement...")
    elif report.strategy is None:
        st.error("🛡️ Perfect Defense! No viable path found. All routes blocked.")
    else:
        st.success("🎯 Optimal Route Found!")
        st.write(f"Path length: {report.best_path_length} steps")
        st.write(f"Defense rating: {report.difficulty}/100")
        st.write(f"Strategy: {report.strategy.description}")

    st.subheader("Predicted route")
    if not report.predictions:
        st.caption("AI will analyze possible attack routes once you place towers...")
    for path_step in report.predictions:
        pos = path_step.position
        line = f"Step {path_step.index}: Move to ({pos.row}, {pos.col})"
        if path_step.near_tower:
            st.markdown(f":red[{line}]")
        else:
            st.markdown(line)


def place_buttons(state: State) -> None:
    for row in range(state.rows):
        cols = st.columns(state.cols)
        for col, column in enumerate(cols):
            pos = Position(row, col)
            label = CELL_GLYPHS[display_cell(state, pos)]
            disabled = not (
                st.session_state["placing_tower"] and session.can_place_tower(pos)
            )
            if column.button(
                label,
                key=f"cell_{row}_{col}",
                disabled=disabled,
                use_container_width=True,
            ):
                st.session_state["placing_tower"] = False
                with st.spinner("🤖 AI analyzing defenses..."):
                    session.place_tower(pos)
                st.rerun()


# --------- Main App ---------

left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

with middle_col:
    st.info(PHASE_TEXT[session.state.phase])
    board_placeholder = st.empty()
    board_placeholder.image(renderer.render(session.state))
    status_placeholder = st.empty()
    if session.state.message:
        status_placeholder.write(session.state.message)

    def redraw(state: State) -> None:
        board_placeholder.image(renderer.render(state))
        if state.message:
            status_placeholder.write(state.message)

    session.listeners = [redraw]

with right_col:
    in_setup = session.state.phase == Phase.SETUP
    placing = st.session_state["placing_tower"]
    if st.button(
        "❌ Cancel" if placing else "🏗️ Place Tower",
        key="tower_btn",
        disabled=not in_setup,
        use_container_width=True,
    ):
        st.session_state["placing_tower"] = not placing
        st.rerun()

    if st.button(
        "⚔️ Start Battle",
        key="battle_btn",
        disabled=not session.can_start_battle(),
        use_container_width=True,
    ):
        session.start_battle()
        st.rerun()

    if st.button("🔁 Reset", key="reset_btn", use_container_width=True):
        st.session_state["placing_tower"] = False
        session.reset()
        st.rerun()

    show_stats(build_report(session.state))

with left_col:
    show_strategy(build_report(session.state))

st.divider()
st.caption("Pick an empty cell after pressing 🏗️ Place Tower.")
place_buttons(session.state)
