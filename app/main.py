"""Streamlit front end.

Run with ``streamlit run app/main.py``. The sidebar picks a bundled map;
if a map file cannot be read the app asks for a ``.txt`` upload instead.
"""

import logging
from typing import Optional

import streamlit as st

from pushbox.actions import ACTION_DIRECTIONS, Action
from pushbox.components import EntityKind
from pushbox.levels.loader import BUNDLED_MAPS, FallbackMapSource, bundled_map_source
from pushbox.renderer.image import ImageRenderer
from pushbox.session import Session

logging.basicConfig(level=logging.INFO)

ACTION_LABELS = {
    Action.UP: "⬆️",
    Action.LEFT: "⬅️",
    Action.RIGHT: "➡️",
    Action.DOWN: "⬇️",
    Action.RESET: "🔄 Reset",
}


def uploaded_map_text(name: str) -> str:
    """Fallback map source: text of a map file uploaded by the user."""
    uploaded = st.file_uploader(
        f"Map '{name}' could not be loaded. Upload a .txt map file instead.",
        type=["txt"],
        key=f"upload_{name}",
    )
    if uploaded is None:
        st.stop()
    return uploaded.getvalue().decode("utf-8")


def get_session() -> Session:
    if "session" not in st.session_state:
        st.session_state["session"] = Session(bridge=ImageRenderer())
        st.session_state["map_name"] = None
    return st.session_state["session"]


def select_map(session: Session) -> None:
    titles = [title for title, _ in BUNDLED_MAPS]
    title = st.sidebar.radio("Map", titles)
    name = dict(BUNDLED_MAPS)[title]
    if st.session_state["map_name"] != name:
        source = FallbackMapSource(bundled_map_source(), uploaded_map_text)
        session.load_map(name, source)
        st.session_state["map_name"] = name


def direction_pad() -> Optional[Action]:
    _, up, _ = st.columns(3)
    left, down, right = st.columns(3)
    pressed: Optional[Action] = None
    for column, action in (
        (up, Action.UP),
        (left, Action.LEFT),
        (down, Action.DOWN),
        (right, Action.RIGHT),
    ):
        if column.button(ACTION_LABELS[action], key=action.value, width="stretch"):
            pressed = action
    if st.button(ACTION_LABELS[Action.RESET], key=Action.RESET.value):
        pressed = Action.RESET
    return pressed


def do_action(session: Session, action: Action) -> None:
    if action == Action.RESET:
        session.handle_reset_input()
    else:
        session.handle_directional_input(ACTION_DIRECTIONS[action])


def display_status(session: Session) -> None:
    assert session.state is not None
    boxes = session.positions_of(EntityKind.BOX)
    spots = set(session.positions_of(EntityKind.TARGET_SPOT))
    on_target = sum(1 for pos in boxes if pos in spots)
    st.metric("Turn", session.state.turn)
    st.metric("Boxes on target", f"{on_target}/{len(boxes)}")
    if session.won:
        st.success("You win", icon="🎉")


def main() -> None:
    st.set_page_config(page_title="pushbox", layout="wide")
    session = get_session()
    select_map(session)

    board, controls = st.columns([3, 1])
    with controls:
        action = direction_pad()
        if action is not None:
            do_action(session, action)
        display_status(session)
    with board:
        bridge = session.bridge
        assert isinstance(bridge, ImageRenderer)
        st.image(bridge.frame(), width="stretch")


main()
