# app.py - eight-node conundrum UI (arrangement entry, manual/auto play in sidebar)
from typing import List, Optional
import time
import streamlit as st

from puzzle_state import GOAL, Grid, IllegalMoveError, PuzzleState, is_arrangement
from render import render_board, shuffle_via_legal_moves, solution_json
from solver_impl import ConundrumError, Solver, SolverConfig


def _reset_playback(ss, moves_made: int = 0):
    ss.solution, ss.moves, ss.step = [], [], 0
    ss.moves_made = moves_made
    ss.last_tick = 0.0


def _goto_step(ss, step: int):
    ss.step = step
    ss.last_tick = 0.0
    st.rerun()


def step_controls(ss, last_idx: int):
    """Prev / Next / End buttons for walking through a solution."""
    prev_col, next_col, end_col = st.columns(3)
    at_start, at_end = ss.step <= 0, ss.step >= last_idx
    if prev_col.button("⬅️ Prev", disabled=at_start):
        _goto_step(ss, ss.step - 1)
    if next_col.button("➡️ Next", disabled=at_end):
        _goto_step(ss, ss.step + 1)
    if end_col.button("⏩ End", disabled=at_end):
        _goto_step(ss, last_idx)


def autoplay_tick(ss, last_idx: int, speed_ms: int):
    """Wait out the rest of the current frame, then advance one move."""
    now_ms = time.time() * 1000.0
    due_ms = (ss.last_tick or now_ms) + speed_ms
    time.sleep(max(0.0, due_ms - now_ms) / 1000.0)
    ss.step = min(last_idx, ss.step + 1)
    ss.last_tick = time.time() * 1000.0
    st.rerun()


#  Streamlit UI
st.set_page_config(page_title="Eight-node conundrum", layout="centered")
st.title("Eight-node conundrum")
st.caption("Enter or shuffle an arrangement → Solve (A*) → Step-by-step.")

# Session state
ss = st.session_state
if "state" not in ss: ss.state = GOAL
if "solution" not in ss: ss.solution = []         # List[Grid]
if "moves" not in ss: ss.moves = []               # List[int], tiles slid into the blank
if "step" not in ss: ss.step = 0
if "moves_made" not in ss: ss.moves_made = 0
if "start_time" not in ss: ss.start_time = time.time()
if "last_tick" not in ss: ss.last_tick = 0.0

#  TOP: arrangement entry
st.subheader("1) Choose an arrangement")
raw = st.text_input("Eight values 0..7, node order, 0 = blank",
                    value=" ".join(str(v) for v in ss.state))
if st.button("Load arrangement"):
    try:
        values = [int(tok) for tok in raw.replace(",", " ").split()]
    except ValueError:
        values = None
    if values is not None and is_arrangement(values):
        ss.state = tuple(values)
        _reset_playback(ss)
        ss.start_time = time.time()
    else:
        st.error("Enter each of 0..7 exactly once.")

st.divider()

#  SIDEBAR: controls
st.sidebar.header("Controls")

shuffle_steps = st.sidebar.slider("Shuffle moves", 10, 100, 40, 5)
max_expansions = st.sidebar.number_input("Expansion budget (0 = none)", min_value=0, value=0, step=10_000)
ancestor_only = st.sidebar.checkbox("Ancestor-only duplicate check", value=False)

st.sidebar.subheader("Manual moves")
current = PuzzleState(ss.state)
for tile in current.movable_tiles():
    if st.sidebar.button(f"Slide {tile}", key=f"slide-{tile}"):
        try:
            ss.state = current.move(tile).tiles
        except IllegalMoveError as e:
            st.sidebar.error(str(e))
        else:
            _reset_playback(ss, ss.moves_made + 1)
            st.rerun()

st.sidebar.subheader("Autoplay solution")
auto_play = st.sidebar.checkbox("Enable autoplay", value=False, key="autoplay")
auto_speed_ms = st.sidebar.slider("Speed (ms/step)", 100, 1500, 300, 50)

#  MAIN: top buttons
shuffle_col, solve_col, reset_col = st.columns(3)

if shuffle_col.button("Shuffle"):
    ss.state = shuffle_via_legal_moves(shuffle_steps)
    _reset_playback(ss)
    ss.start_time = time.time()

if solve_col.button("Solve"):
    config = SolverConfig(max_expansions=int(max_expansions) or None, use_closed_set=not ancestor_only)
    try:
        result = Solver(config).solve(ss.state)
    except ConundrumError as e:
        _reset_playback(ss, ss.moves_made)
        st.error(f"Solver error: {e}")
    else:
        _reset_playback(ss)
        ss.solution, ss.moves = result.path, result.moves
        ss.start_time = time.time()
        st.caption(f"Expanded {result.expanded} · generated {result.generated}")

if reset_col.button("Reset"):
    ss.state = GOAL
    _reset_playback(ss)
    ss.start_time = time.time()

#  Playback + stats
sol: List[Grid] = ss.solution
elapsed = time.time() - ss.get("start_time", time.time())
st.caption(f"Manual moves: {ss.moves_made}  •  Elapsed: {elapsed:0.1f}s")

last_idx = max(len(sol) - 1, 0)
highlight: Optional[int] = None
display_state = ss.state
if last_idx:
    ss.step = min(max(ss.step, 0), last_idx)
    st.write(f"Solution length: **{last_idx}** moves: {' '.join(str(m) for m in ss.moves)}")
    step_controls(ss, last_idx)
    display_state = sol[ss.step]
    if ss.step < last_idx:
        highlight = ss.moves[ss.step]
    caption = f"Step {ss.step}/{last_idx}"
elif sol:
    caption = "Already at the goal"
else:
    caption = "Current arrangement"

st.image(render_board(display_state, highlight=highlight), caption=caption, use_container_width=True)

if last_idx and auto_play and ss.step < last_idx:
    autoplay_tick(ss, last_idx, auto_speed_ms)
    st.stop()

if last_idx:
    st.download_button("Download solution (JSON)",
                       data=solution_json(ss.moves, sol),
                       file_name="solution.json",
                       mime="application/json")
