"""The hexagonal board of Catch the Cat and a console runner for it."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Sequence

from mobagen import rng
from mobagen.catagents import Cat, Catcher
from mobagen.point2d import Point2D


class World:
    """A square map of hexagonal cells centred on (0, 0); True cells are blocked."""

    def __init__(self, size: int = 11) -> None:
        if size % 2 == 0:
            raise ValueError("the world side size must be odd")
        self._setup(size, Point2D(0, 0), True, [])
        self.clear()

    def _setup(self, side_size: int, cat_position: Point2D, cat_turn: bool, state: list[bool]) -> None:
        self.side_size = side_size
        self.cat_position = cat_position
        self.cat_turn = cat_turn
        self._state = state
        self.time_between_ai_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.is_simulating = False
        self.move_duration = 0
        self.cat_won = False
        self.catcher_won = False
        self.cat = Cat()
        self.catcher = Catcher()

    @classmethod
    def from_state(cls, side_size: int, cat_turn: bool, cat_position: Point2D, state: Sequence[bool]) -> World:
        """A world with a given map, cat position and turn."""
        cells = [bool(c) for c in state]
        if len(cells) != side_size * side_size:
            raise ValueError("the map must hold side_size * side_size cells")
        world = cls.__new__(cls)
        world._setup(side_size, cat_position, cat_turn, cells)
        return world

    @property
    def state(self) -> tuple[bool, ...]:
        """The cells row by row, from the top left corner."""
        return tuple(self._state)

    @staticmethod
    def e(point: Point2D) -> Point2D:
        return Point2D(point.x + 1, point.y)

    @staticmethod
    def w(point: Point2D) -> Point2D:
        return Point2D(point.x - 1, point.y)

    @staticmethod
    def ne(point: Point2D) -> Point2D:
        if point.y % 2:
            return Point2D(point.x + 1, point.y - 1)
        return Point2D(point.x, point.y - 1)

    @staticmethod
    def nw(point: Point2D) -> Point2D:
        if point.y % 2:
            return Point2D(point.x, point.y - 1)
        return Point2D(point.x - 1, point.y - 1)

    @staticmethod
    def se(point: Point2D) -> Point2D:
        if point.y % 2:
            return Point2D(point.x, point.y + 1)
        return Point2D(point.x - 1, point.y + 1)

    @staticmethod
    def sw(point: Point2D) -> Point2D:
        if point.y % 2:
            return Point2D(point.x + 1, point.y + 1)
        return Point2D(point.x, point.y + 1)

    @staticmethod
    def neighbors(point: Point2D) -> list[Point2D]:
        """The six neighbours in the order NE, NW, E, W, SW, SE."""
        return [World.ne(point), World.nw(point), World.e(point), World.w(point), World.sw(point), World.se(point)]

    @staticmethod
    def is_neighbor(p1: Point2D, p2: Point2D) -> bool:
        return p2 in World.neighbors(p1)

    def _index(self, point: Point2D) -> int:
        half = self.side_size // 2
        return (point.y + half) * self.side_size + point.x + half

    def content(self, point: Point2D) -> bool:
        """Whether the cell is blocked."""
        if not self.is_valid_position(point):
            raise IndexError(f"{point} is outside the world")
        return self._state[self._index(point)]

    def is_valid_position(self, point: Point2D) -> bool:
        half = self.side_size // 2
        return -half <= point.x <= half and -half <= point.y <= half

    def clear(self) -> None:
        """Start a new game on a freshly randomised map."""
        count = self.side_size * self.side_size
        self._state = [False] * count
        for _ in range(math.ceil(count * 0.05)):
            self._state[rng.range_int(0, count - 1)] = True
        self.cat_position = Point2D(0, 0)
        self._state[count // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    def step(self) -> None:
        """Play one turn; after a finished game, start a new one instead."""
        if self.cat_won or self.catcher_won:
            self.clear()
            return

        start = time.perf_counter_ns()
        if self.cat_turn:
            move = self.cat.move(self)
            if self.cat_can_move_to(move):
                self.cat_position = move
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self.catcher.move(self)
            if self.catcher_can_move_to(move):
                self._state[self._index(move)] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the turn timer and play a turn when it runs out."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ai_ticks

    def _cat_win_verification(self) -> bool:
        return self.cat_wins_on_space(self.cat_position)

    def _catcher_win_verification(self) -> bool:
        return all(
            self.is_valid_position(p) and self.content(p) for p in self.neighbors(self.cat_position)
        )

    def cat_can_move_to(self, point: Point2D) -> bool:
        return (
            self.is_neighbor(self.cat_position, point)
            and self.is_valid_position(point)
            and not self.content(point)
        )

    def catcher_can_move_to(self, point: Point2D) -> bool:
        half = self.side_size // 2
        return point != self.cat_position and abs(point.x) <= half and abs(point.y) <= half

    def cat_wins_on_space(self, point: Point2D) -> bool:
        half = self.side_size // 2
        return abs(point.x) == half or abs(point.y) == half

    def render(self) -> str:
        """The map as text: C for the cat, # for blocked, . for free; odd rows indented."""
        half = self.side_size // 2
        lines = []
        for row in range(self.side_size):
            y = row - half
            cells = []
            for x in range(-half, half + 1):
                point = Point2D(x, y)
                if point == self.cat_position:
                    cells.append("C")
                else:
                    cells.append("#" if self.content(point) else ".")
            lines.append((" " if row % 2 else "") + " ".join(cells))
        return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game of Catch the Cat between the two AI agents in the console."""
    parser = argparse.ArgumentParser(prog="catchthecat", description="Play Catch the Cat between two AI agents.")
    parser.add_argument("--size", type=int, default=21, help="odd side size of the map")
    parser.add_argument("--turns", type=int, default=10000, help="maximum number of turns")
    parser.add_argument("--quiet", action="store_true", help="print only the result")
    args = parser.parse_args(argv)
    if args.size < 1 or args.size % 2 == 0:
        parser.error("size must be a positive odd number")

    world = World(args.size)
    if not args.quiet:
        print(world.render())
    for _ in range(args.turns):
        if world.cat_won or world.catcher_won:
            break
        mover = "Cat" if world.cat_turn else "Catcher"
        world.step()
        if not args.quiet:
            print(f"{mover} moved in {world.move_duration} us")
            print(world.render())

    if world.cat_won:
        print("Cat wins")
    elif world.catcher_won:
        print("Catcher wins")
    else:
        print("No winner")
    return 0