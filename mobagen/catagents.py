"""The two players of Catch the Cat: the cat that flees and the catcher that blocks."""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mobagen import rng
from mobagen.point2d import Point2D

if TYPE_CHECKING:
    from mobagen.catworld import World


class Agent(ABC):
    """A player that chooses a cell of the hexagonal world each turn."""

    @abstractmethod
    def move(self, world: World) -> Point2D:
        """The cell this agent chooses for its turn."""

    def generate_path(self, world: World) -> list[Point2D]:
        """A* path from the cat to the border.

        The first element is the border cell reached, the last one the cat's
        next step. The list is empty when no border cell can be reached.
        """
        cat = world.cat_position
        side = world.side_size
        came_from: dict[Point2D, Point2D] = {}
        visited: set[Point2D] = set()
        order = itertools.count()
        frontier = [(side // 2, next(order), 0, cat)]
        border_exit: Point2D | None = None

        while frontier:
            _, _, travelled, current = heapq.heappop(frontier)
            visited.add(current)
            if world.cat_wins_on_space(current):
                border_exit = current
                break
            for neighbor in self.visitable_neighbors(world, current):
                if neighbor in visited:
                    continue
                came_from.setdefault(neighbor, current)
                cost = travelled + 1
                estimate = cost + self.heuristic(neighbor, side)
                heapq.heappush(frontier, (estimate, next(order), cost, neighbor))

        if border_exit is None:
            return []
        path = []
        point = border_exit
        while point != cat:
            path.append(point)
            point = came_from[point]
        return path

    def visitable_neighbors(self, world: World, point: Point2D) -> list[Point2D]:
        """Neighbours of ``point`` inside the world and not blocked."""
        candidates = (world.ne(point), world.nw(point), world.e(point), world.w(point), world.sw(point), world.se(point))
        return [p for p in candidates if world.is_valid_position(p) and not world.content(p)]

    def heuristic(self, point: Point2D, side_size: int) -> int:
        """Estimated number of steps from ``point`` to the border."""
        half = side_size // 2
        if point.x == 0 and point.y == 0:
            return half
        if point.x + point.y > 0:
            if point.x - point.y > 0:
                return abs(half - point.x)
            return abs(half - point.y)
        if point.x - point.y > 0:
            return abs(-half + point.y)
        return abs(-half + point.x)


class Cat(Agent):
    """Runs along the shortest path to the border, or wanders when trapped."""

    def move(self, world: World) -> Point2D:
        choice = rng.range_int(0, 5)
        position = world.cat_position
        path = self.generate_path(world)
        if path:
            return path[-1]
        directions = (world.ne, world.nw, world.e, world.w, world.sw, world.se)
        return directions[choice](position)


class Catcher(Agent):
    """Blocks the cat's escape cell, or a random free cell once the cat is trapped."""

    def move(self, world: World) -> Point2D:
        path = self.generate_path(world)
        if path:
            return path[0]
        half = world.side_size // 2
        cat = world.cat_position
        while True:
            candidate = Point2D(rng.range_int(-half, half), rng.range_int(-half, half))
            if cat.x != candidate.x and cat.y != candidate.y and not world.content(candidate):
                return candidate