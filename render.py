# render.py - board drawing, shuffle and export helpers for app.py
import json
import random
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from puzzle_state import ADJACENCY, GOAL, Grid, PuzzleState

# Node centres on a unit square, scaled to the canvas at draw time
NODE_POSITIONS = (
    (0.50, 0.10),
    (0.25, 0.32),
    (0.75, 0.32),
    (0.25, 0.62),
    (0.50, 0.62),
    (0.75, 0.62),
    (0.25, 0.90),
    (0.75, 0.90),
)

EDGE_COLOR = (30, 30, 30)
TILE_COLOR = (255, 213, 128)
GOAL_TILE_COLOR = (150, 220, 150)
BLANK_COLOR = (245, 245, 245)
HIGHLIGHT_COLOR = (220, 60, 60)


def shuffle_via_legal_moves(steps: int = 40, rng: Optional[random.Random] = None) -> Grid:
    """Shuffle by valid moves from GOAL (always solvable)."""
    rng = rng or random.Random()
    state = PuzzleState(GOAL)
    prev: Optional[PuzzleState] = None
    for _ in range(steps):
        opts = sorted(state.neighbors(), key=lambda s: s.tiles)
        if prev in opts and len(opts) > 1:
            opts = [s for s in opts if s != prev]  # avoid immediate undo
        prev, state = state, rng.choice(opts)
    return state.tiles


def solution_json(moves: Sequence[int], path: Sequence[Sequence[int]]) -> str:
    """JSON download payload: tiles moved and every arrangement visited."""
    return json.dumps({"moves": list(moves), "path": [list(s) for s in path]}, indent=2)


def _measure_text(draw: ImageDraw.ImageDraw, text: str, font: ImageFont.ImageFont) -> Tuple[int, int]:
    l, t, r, b = draw.textbbox((0, 0), text, font=font)
    return r - l, b - t


def _load_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans-Bold.ttf", size)
    except OSError:
        return ImageFont.load_default()


def render_board(state: Sequence[int], side: int = 600,
                 highlight: Optional[int] = None) -> Image.Image:
    """Draw the eight-node graph with the tiles of `state` on it.

    `highlight` outlines the node holding that tile value.
    """
    canvas = Image.new("RGB", (side, side), (255, 255, 255))
    draw = ImageDraw.Draw(canvas)
    radius = side // 12
    font = _load_font(radius)
    centres = [(int(x * side), int(y * side)) for x, y in NODE_POSITIONS]

    for node, links in enumerate(ADJACENCY):
        for other in links:
            if other > node:
                draw.line([centres[node], centres[other]], width=4, fill=EDGE_COLOR)

    for node, val in enumerate(state):
        cx, cy = centres[node]
        box = [cx - radius, cy - radius, cx + radius, cy + radius]
        if val == 0:
            fill = BLANK_COLOR
        elif val == GOAL[node]:
            fill = GOAL_TILE_COLOR
        else:
            fill = TILE_COLOR
        outline = HIGHLIGHT_COLOR if highlight is not None and val == highlight else EDGE_COLOR
        draw.ellipse(box, fill=fill, outline=outline, width=4)
        if val != 0:
            text = str(val)
            tw, th = _measure_text(draw, text, font)
            draw.text((cx - tw // 2, cy - th // 2), text, fill=EDGE_COLOR, font=font)
    return canvas
