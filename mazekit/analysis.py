# analysis.py
# -----------------------------------------------------------------------------
# Structural checks over a finished maze: treat passable cells as graph
# nodes joined to their 4-neighbours and ask whether that graph is a tree.
# -----------------------------------------------------------------------------
import hashlib
from collections import deque
from typing import Dict, List, Optional, Tuple

from mazekit.direction import Direction
from mazekit.grid import Space
from mazekit.point import Point

Cell = Tuple[int, int]


def passable_graph(maze) -> Dict[Cell, List[Cell]]:
    G = {}
    for r in range(maze.rows):
        for c in range(maze.columns):
            if maze.get(r, c) != Space.PASSABLE:
                continue
            nbrs = []
            for d in Direction.cases():
                dr, dc = d.delta
                nr, nc = r + dr, c + dc
                if 0 <= nr < maze.rows and 0 <= nc < maze.columns and maze.get(nr, nc) == Space.PASSABLE:
                    nbrs.append((nr, nc))
            G[(r, c)] = nbrs
    return G

def bfs_distances(graph: Dict[Cell, List[Cell]], source: Cell) -> Dict[Cell, int]:
    dist = {source: 0}
    q = deque([source])
    while q:
        u = q.popleft()
        for v in graph[u]:
            if v not in dist:
                dist[v] = dist[u] + 1
                q.append(v)
    return dist

def shortest_path(graph: Dict[Cell, List[Cell]], start: Cell, goal: Cell) -> List[Cell]:
    if start not in graph:
        return []
    q = deque([start])
    parent = {start: None}
    while q:
        u = q.popleft()
        if u == goal:
            break
        for v in graph[u]:
            if v not in parent:
                parent[v] = u
                q.append(v)
    if goal not in parent:
        return []
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    return list(reversed(path))

def edge_count(graph: Dict[Cell, List[Cell]]) -> int:
    return sum(len(nbrs) for nbrs in graph.values()) // 2

def is_connected(maze, graph: Optional[Dict[Cell, List[Cell]]] = None) -> bool:
    """Every passable cell reachable from the start cell."""
    G = graph if graph is not None else passable_graph(maze)
    source = maze.start.as_tuple()
    if source not in G:
        return False
    return len(bfs_distances(G, source)) == len(G)

def component_count(graph: Dict[Cell, List[Cell]]) -> int:
    seen = set()
    n = 0
    for cell in graph:
        if cell in seen:
            continue
        n += 1
        seen.update(bfs_distances(graph, cell))
    return n

def is_acyclic(maze, graph: Optional[Dict[Cell, List[Cell]]] = None) -> bool:
    """A forest has exactly (nodes - components) edges."""
    G = graph if graph is not None else passable_graph(maze)
    return edge_count(G) == len(G) - component_count(G)

def is_perfect(maze) -> bool:
    """Exactly one simple path between any two passable cells."""
    G = passable_graph(maze)
    return is_connected(maze, G) and edge_count(G) == len(G) - 1

def farthest_point(maze) -> Optional[Point]:
    """Passable cell with the longest path from the start; ties go to the first in row-major order."""
    G = passable_graph(maze)
    source = maze.start.as_tuple()
    if source not in G:
        return None
    dist = bfs_distances(G, source)
    best = max(sorted(dist), key=lambda cell: dist[cell])
    return Point(*best)

def encode_maze(maze) -> str:
    bits = []
    for r in range(maze.rows):
        for c in range(maze.columns):
            bits.append('1' if maze.get(r, c) == Space.PASSABLE else '0')
    return hashlib.sha256(''.join(bits).encode('ascii')).hexdigest()
