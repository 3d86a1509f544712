# mobagen

A small 2D game toolkit in plain Python, with no third-party dependencies.
It holds two games and the pieces they are built from:

- **Catch the Cat**: a cat on a hexagonal board tries to reach the edge while
  a catcher blocks cells. Both sides are driven by an A* path search.
- **Chess**: a board packed four bits per square, move generation for every
  piece, a material and mobility heuristic and a three ply look-ahead search.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
catchthecat
```

plays one game of Catch the Cat between the two AI agents in the terminal,
printing the board after every move and then the winner.

Options:

- `--size N`: odd side size of the map (default 21)
- `--turns N`: maximum number of turns before stopping (default 10000)
- `--quiet`: print only the result

## Modules

| Module | What it provides |
| --- | --- |
| `mobagen.point2d` | `Point2D`, an immutable integer coordinate with `up()`, `down()`, `left()`, `right()` and the constants `UP`, `DOWN`, `LEFT`, `RIGHT`, `INFINITE` |
| `mobagen.vector2` | `Vector2`, a float vector (y grows downwards): arithmetic, `rotate`, `rotate_towards`, angles, magnitude, distance, `normalized` |
| `mobagen.rng` | `range_float(start, end)` and `range_int(start, end)`, both inclusive |
| `mobagen.transform` | `Transform`: `position`, `scale` and `rotation` |
| `mobagen.polygon` | `Polygon`, `Circle`, `Square`, `Hexagon`, with `drawable_points(transform)` and `edges(transform)` |
| `mobagen.catagents` | `Agent`, `Cat` and `Catcher` for Catch the Cat |
| `mobagen.catworld` | `World`, the Catch the Cat board and turn logic, and the `main` of the `catchthecat` command |
| `mobagen.chess_state` | `WorldState`, `PieceData`, `Move`, `MoveState`, `PieceType`, `PieceColor`, `MoveType`, `IllegalMoveError` |
| `mobagen.chess_pieces` | Attack and cover moves for bishop, rook, queen and knight |
| `mobagen.chess_pawn` | Pawn moves, doubled and isolated pawn checks |
| `mobagen.chess_search` | King moves, `find_king`, `king_check_count`, `list_moves`, `places_king_cannot_go`, `next_move` |
| `mobagen.chess_heuristics` | `material_score` and `distance_to_center` |

## Examples

Catch the Cat on an 11×11 board:

```python
from mobagen.catworld import World

world = World(11)
world.step()          # the cat moves first
world.step()          # then the catcher blocks a cell
print(world.render())
print(world.cat_won, world.catcher_won)
```

Hex neighbourhoods follow offset rows:

```python
from mobagen.catworld import World
from mobagen.point2d import Point2D

World.neighbors(Point2D(0, 0))                     # NE, NW, E, W, SW, SE
World.is_neighbor(Point2D(0, 0), Point2D(1, 0))    # True
```

Chess from the starting position:

```python
from mobagen.chess_state import WorldState
from mobagen.chess_heuristics import material_score
from mobagen.chess_search import next_move

state = WorldState()
state.reset()
print(state)                  # text board, white pieces in upper case
print(material_score(state))  # positive favours white
move = next_move(state)       # the AI's choice for the side to play
state.move(move.origin, move.target)
```

`WorldState.move` raises `IllegalMoveError` when the square is off the board,
holds a piece of the side not to play, or the target holds a piece of the
same colour.

Vectors:

```python
from mobagen.vector2 import Vector2

Vector2.up().rotate(90)   # up turned by 90 degrees
Vector2(3, 4).magnitude() # 5.0
```

## What it does not do

- There is no graphical window, drawing or mouse input: shapes give their
  transformed points and edges, and the Catch the Cat board prints as text.
- There is no chess command or interactive chess play; the chess modules are
  a library for positions, move generation, scoring and choosing a move.
- Chess rules are partial: no castling, en passant, promotion, or checkmate
  and draw detection.