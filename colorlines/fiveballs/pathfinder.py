"""A* search for a route through empty cells."""

from __future__ import annotations

from dataclasses import dataclass

from colorlines.fiveballs.grid import GRID_SIZE, Grid, Point

_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_STEP_COST = 1


def manhattan(a: Point, b: Point) -> int:
    """Return the Manhattan distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(eq=False)
class Node:
    """A search node: a cell with its costs and the node it was reached from."""

    position: Point
    g_cost: int
    h_cost: int
    parent: Node | None = None

    def f_cost(self) -> int:
        """Return the estimated total cost through this node."""
        return self.g_cost + self.h_cost


def _inside(point: Point) -> bool:
    return 0 <= point[0] < GRID_SIZE and 0 <= point[1] < GRID_SIZE


class Pathfinder:
    """Finds shortest orthogonal routes that pass only through empty cells."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    @staticmethod
    def _reconstruct(node: Node | None) -> list[Point]:
        path: list[Point] = []
        while node is not None:
            path.append(node.position)
            node = node.parent
        path.reverse()
        return path

    def find_path(self, start: Point, end: Point) -> list[Point]:
        """Return the cells from ``start`` to ``end`` inclusive, or [] if none.

        The end cell must be empty and differ from the start; the start cell
        itself may hold the ball being moved.
        """
        start, end = tuple(start), tuple(end)
        if start == end or not _inside(start) or not _inside(end):
            return []
        if not self.grid.is_cell_empty(*end):
            return []

        open_nodes: dict[Point, Node] = {
            start: Node(start, 0, manhattan(start, end), None)
        }
        closed: set[Point] = set()

        while open_nodes:
            current = min(open_nodes.values(), key=lambda n: (n.f_cost(), n.h_cost))
            del open_nodes[current.position]
            if current.position == end:
                return self._reconstruct(current)
            closed.add(current.position)

            cx, cy = current.position
            for dx, dy in _STEPS:
                neighbor = (cx + dx, cy + dy)
                if not _inside(neighbor) or neighbor in closed:
                    continue
                if neighbor != end and not self.grid.is_cell_empty(*neighbor):
                    continue
                g_cost = current.g_cost + _STEP_COST
                known = open_nodes.get(neighbor)
                if known is None:
                    open_nodes[neighbor] = Node(
                        neighbor, g_cost, manhattan(neighbor, end), current
                    )
                elif g_cost < known.g_cost:
                    known.g_cost = g_cost
                    known.parent = current
        return []