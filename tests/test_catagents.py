import pytest

from mobagen.catagents import Agent, Cat, Catcher
from mobagen.catworld import World
from mobagen.point2d import Point2D


def make_world(side, cat, blocked=(), cat_turn=True):
    half = side // 2
    state = [False] * (side * side)
    for p in blocked:
        state[(p.y + half) * side + p.x + half] = True
    return World.from_state(side, cat_turn, cat, state)


def all_points(side):
    half = side // 2
    return [Point2D(x, y) for y in range(-half, half + 1) for x in range(-half, half + 1)]


def enclosed_world(cat_turn=True):
    origin = Point2D(0, 0)
    return make_world(5, origin, World.neighbors(origin), cat_turn)


def test_agent_is_abstract():
    with pytest.raises(TypeError):
        Agent()


def test_heuristic_at_center_is_half_side():
    assert Cat().heuristic(Point2D(0, 0), 11) == 5


def test_heuristic_is_zero_on_positive_east_border():
    agent = Cat()
    for y in range(-4, 5):
        assert agent.heuristic(Point2D(5, y), 11) == 0


def test_heuristic_never_negative():
    agent = Catcher()
    assert all(agent.heuristic(p, 11) >= 0 for p in all_points(11))


def test_visitable_neighbors_in_open_world():
    world = make_world(5, Point2D(0, 0))
    origin = Point2D(0, 0)
    assert Cat().visitable_neighbors(world, origin) == World.neighbors(origin)


def test_visitable_neighbors_skip_blocked_and_outside():
    origin = Point2D(0, 0)
    blocked = World.e(origin)
    world = make_world(5, origin, [blocked])
    result = Cat().visitable_neighbors(world, origin)
    assert blocked not in result
    assert len(result) == 5
    corner = Point2D(2, 2)
    for p in Cat().visitable_neighbors(world, corner):
        assert world.is_valid_position(p)


def test_generate_path_leads_from_border_to_cat():
    cat = Point2D(0, 0)
    world = make_world(5, cat, [Point2D(1, 0)])
    path = Cat().generate_path(world)
    assert path
    assert world.cat_wins_on_space(path[0])
    assert World.is_neighbor(cat, path[-1])
    for a, b in zip(path, path[1:]):
        assert World.is_neighbor(a, b)
    assert not any(world.content(p) for p in path)
    assert cat not in path


def test_generate_path_empty_when_enclosed():
    assert Cat().generate_path(enclosed_world()) == []


def test_generate_path_empty_when_cat_on_border():
    world = make_world(5, Point2D(2, 0))
    assert Catcher().generate_path(world) == []


def test_cat_moves_along_path():
    cat = Point2D(0, 0)
    world = make_world(5, cat)
    agent = Cat()
    move = agent.move(world)
    assert move == agent.generate_path(world)[-1]
    assert World.is_neighbor(cat, move)
    assert not world.content(move)


def test_trapped_cat_picks_a_neighbor():
    world = enclosed_world()
    for _ in range(20):
        assert Cat().move(world) in World.neighbors(Point2D(0, 0))


def test_catcher_blocks_border_exit():
    world = make_world(5, Point2D(0, 0), cat_turn=False)
    agent = Catcher()
    move = agent.move(world)
    assert move == agent.generate_path(world)[0]
    assert world.cat_wins_on_space(move)


def test_catcher_random_move_when_cat_trapped():
    world = enclosed_world(cat_turn=False)
    for _ in range(20):
        move = Catcher().move(world)
        assert move.x != 0 and move.y != 0
        assert world.is_valid_position(move)
        assert not world.content(move)