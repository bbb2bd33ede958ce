#!/usr/bin/env python3
"""
maze_gen.py

Text:
  maze-gen text --width 25 --height 9 --seed 42

Image:
  maze-gen image --width 41 --height 41 --seed 7 --out maze.png
  # Optional: --start "r,c" --cell_px 10 --backend mpl

Check (generate many, verify every one is a perfect maze):
  maze-gen check --count 200 --width 21 --height 21 --base-seed 20250924
"""

import argparse
import random
import sys
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from mazekit.analysis import encode_maze, farthest_point, is_perfect
from mazekit.maze import Maze
from mazekit.point import Point
from mazekit.render import DEF_CELL_PX, draw_maze_image, plot_maze, to_text

DEF_BASE_SEED = 20250924


def build_maze(width: int, height: int, start: Optional[Point], seed: Optional[int]) -> Maze:
    rng = random.Random(seed)
    maze = Maze(width, height, start=start, rng=rng)
    maze.generate()
    return maze

def check_mazes(count: int, width: int, height: int,
                base_seed: int = DEF_BASE_SEED) -> Tuple[int, int, List[int]]:
    """
    Generate `count` mazes with seeds base_seed + i.
    Returns (checked, unique, failed_seeds).
    """
    seen = set()
    failed = []
    for idx in range(count):
        seed = base_seed + idx
        maze = build_maze(width, height, None, seed)
        seen.add(encode_maze(maze))
        if not is_perfect(maze):
            failed.append(seed)
    return count, len(seen), failed

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Perfect maze generator (randomized DFS backtracking).")
    sub = parser.add_subparsers(dest="cmd", required=True)

    def add_common(p):
        p.add_argument("--width", type=int, default=21)
        p.add_argument("--height", type=int, default=21)
        p.add_argument("--start", type=str, default=None, help="start 'r,c' (default 0,0)")
        p.add_argument("--seed", type=int, default=None)

    p_txt = sub.add_parser("text", help="Print a maze as bordered text.")
    add_common(p_txt)

    p_img = sub.add_parser("image", help="Render a maze to PNG.")
    add_common(p_img)
    p_img.add_argument("--cell_px", type=int, default=DEF_CELL_PX)
    p_img.add_argument("--backend", choices=["pil", "mpl"], default="pil")
    p_img.add_argument("--no-knobs", action="store_true", help="Don't mark start / farthest cell.")
    p_img.add_argument("--out", type=str, required=True)

    p_chk = sub.add_parser("check", help="Generate many mazes and verify each is perfect.")
    p_chk.add_argument("--count", type=int, default=100)
    p_chk.add_argument("--width", type=int, default=21)
    p_chk.add_argument("--height", type=int, default=21)
    p_chk.add_argument("--base-seed", type=int, default=DEF_BASE_SEED)

    args = parser.parse_args(argv)

    if args.cmd == "text":
        start = Point.parse(args.start) if args.start else None
        maze = build_maze(args.width, args.height, start, args.seed)
        print(to_text(maze), end="")

    elif args.cmd == "image":
        start = Point.parse(args.start) if args.start else None
        maze = build_maze(args.width, args.height, start, args.seed)
        s = g = None
        if not args.no_knobs:
            s = maze.start.as_tuple()
            g = farthest_point(maze).as_tuple()
        if args.backend == "pil":
            draw_maze_image(maze, args.out, cell_px=args.cell_px, start=s, goal=g)
        else:
            fig, _ax = plot_maze(maze, start=s, goal=g)
            fig.savefig(args.out)
            plt.close(fig)
        print(f"Maze {maze.rows}x{maze.columns} saved to {args.out}")

    elif args.cmd == "check":
        checked, uniq, failed = check_mazes(args.count, args.width, args.height, args.base_seed)
        print(f"Checked {checked} mazes (unique mazes: {uniq}).")
        if failed:
            print(f"Not perfect for seeds: {failed}")
            return 1
        print("All mazes perfect.")

    return 0

if __name__ == "__main__":
    sys.exit(main())
