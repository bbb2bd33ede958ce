# render.py
# -----------------------------------------------------------------------------
# Presentation helpers. Everything here reads a maze through get(), rows and
# columns only; nothing writes back.
# -----------------------------------------------------------------------------
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from mazekit.grid import Space

# -------------------------
# Defaults
# -------------------------
GLYPH_PASSABLE   = "  "
GLYPH_IMPASSABLE = "██"

DEF_CELL_PX  = 12               # side of one grid cell (px)
DEF_PAD_PX   = 12               # white margin around the maze (px)
DEF_WALL_RGB = (0, 0, 0)
DEF_PATH_RGB = (255, 255, 255)
DEF_START_RGB = (255, 0, 0)
DEF_GOAL_RGB  = (0, 200, 0)


# -------------------------
# Text
# -------------------------

def to_text(maze, passable: str = GLYPH_PASSABLE, impassable: str = GLYPH_IMPASSABLE) -> str:
    """Bordered text block, two characters per cell. Debugging aid."""
    border = "━" * (maze.columns * 2)
    lines = [f"┏{border}┓"]
    for r in range(maze.rows):
        row = "".join(passable if maze.get(r, c) == Space.PASSABLE else impassable
                      for c in range(maze.columns))
        lines.append(f"┃{row}┃")
    lines.append(f"┗{border}┛")
    return "\n".join(lines) + "\n"


def occupancy(maze) -> np.ndarray:
    """(rows, columns) uint8 array, 1 = passable."""
    return np.array([[int(maze.get(r, c)) for c in range(maze.columns)]
                     for r in range(maze.rows)], dtype=np.uint8)


# -------------------------
# Pillow
# -------------------------

def cell_center_xy(r: int, c: int, cell_px: int, x0: int, y0: int) -> Tuple[float, float]:
    x = x0 + (c + 0.5) * cell_px
    y = y0 + (r + 0.5) * cell_px
    return x, y

def _circle(draw: ImageDraw.ImageDraw, cx, cy, r, color):
    x0, y0 = int(cx - r), int(cy - r)
    x1, y1 = int(cx + r), int(cy + r)
    draw.ellipse([x0, y0, x1, y1], fill=color, outline=None)

def draw_maze_image(
    maze,
    out_png: Optional[str] = None,
    *,
    cell_px: int = DEF_CELL_PX,
    pad_px: int = DEF_PAD_PX,
    wall_rgb: Tuple[int, int, int] = DEF_WALL_RGB,
    path_rgb: Tuple[int, int, int] = DEF_PATH_RGB,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
) -> Image.Image:
    """
    Draw one square per cell. Start/goal knobs are optional (r, c) pairs.
    Saves to `out_png` when given and always returns the image.
    """
    if cell_px <= 0:
        raise ValueError(f"cell_px must be positive, got {cell_px}.")
    occ = occupancy(maze)
    # scale each cell up to cell_px x cell_px
    block = np.kron(occ, np.ones((cell_px, cell_px), dtype=np.uint8))
    rgb = np.where(block[..., None] == Space.PASSABLE,
                   np.array(path_rgb, dtype=np.uint8),
                   np.array(wall_rgb, dtype=np.uint8)).astype(np.uint8)

    maze_h, maze_w = block.shape
    im = Image.new("RGB", (maze_w + 2 * pad_px, maze_h + 2 * pad_px), (255, 255, 255))
    im.paste(Image.fromarray(rgb, "RGB"), (pad_px, pad_px))

    dr = ImageDraw.Draw(im)
    knob_r = max(1, cell_px // 2 - 1)
    if start is not None:
        cx, cy = cell_center_xy(start[0], start[1], cell_px, pad_px, pad_px)
        _circle(dr, cx, cy, knob_r, DEF_START_RGB)
    if goal is not None:
        cx, cy = cell_center_xy(goal[0], goal[1], cell_px, pad_px, pad_px)
        _circle(dr, cx, cy, knob_r, DEF_GOAL_RGB)

    if out_png:
        im.save(out_png)
    return im


# -------------------------
# matplotlib
# -------------------------

def plot_maze(maze, start=None, goal=None, ax=None, show: bool = False):
    """Occupancy plot of the maze. Returns (fig, ax)."""
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=(maze.columns * 0.2 + 1, maze.rows * 0.2 + 1))
    else:
        fig = ax.figure

    ax.imshow(occupancy(maze), cmap="gray", vmin=0, vmax=1, interpolation="nearest")
    if start is not None:
        ax.scatter(start[1], start[0], s=60, c="red", edgecolors="none", zorder=3)
    if goal is not None:
        ax.scatter(goal[1], goal[0], s=60, c="green", edgecolors="none", zorder=3)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f"Maze {maze.rows} x {maze.columns}")

    if show:
        plt.show()
    return fig, ax
