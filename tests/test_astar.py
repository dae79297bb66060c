import math

import pytest

from roguekit.astar import AStarSearch, AStarState, SearchState


class Grid:
    def __init__(self, width, height, walls=()):
        self.width = width
        self.height = height
        self.walls = set(walls)

    def open(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height and (x, y) not in self.walls


class Cell(AStarState):
    def __init__(self, grid, x, y, heuristic=True):
        self.grid = grid
        self.pos = (x, y)
        self.heuristic = heuristic

    def goal_distance_estimate(self, goal):
        if not self.heuristic:
            return 0.0
        return float(abs(self.pos[0] - goal.pos[0]) + abs(self.pos[1] - goal.pos[1]))

    def is_goal(self, goal):
        return self.pos == goal.pos

    def get_successors(self, search, parent):
        x, y = self.pos
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if self.grid.open(nx, ny) and (parent is None or parent.pos != (nx, ny)):
                search.add_successor(Cell(self.grid, nx, ny, self.heuristic))
        return True

    def get_cost(self, successor):
        return 1.0

    def is_same_state(self, other):
        return self.pos == other.pos


class GreedyCell(Cell):
    def get_successors(self, search, parent):
        x, y = self.pos
        added = [
            search.add_successor(GreedyCell(self.grid, nx, ny))
            for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
            if self.grid.open(nx, ny)
        ]
        return all(added)


def run(search, limit=10000):
    state = SearchState.SEARCHING
    for _ in range(limit):
        state = search.search_step()
        if state != SearchState.SEARCHING:
            return state
    raise AssertionError("search did not finish")


def positions(states):
    return [s.pos for s in states]


def adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_straight_line_path():
    grid = Grid(5, 5)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 3, 0))
    assert run(search) == SearchState.SUCCEEDED
    path = positions(search.solution())
    assert path[0] == (0, 0)
    assert path[-1] == (3, 0)
    assert all(adjacent(a, b) for a, b in zip(path, path[1:]))
    assert search.solution_cost() == len(path) - 1


def test_path_around_wall():
    walls = [(2, y) for y in range(4)]
    grid = Grid(5, 5, walls)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 4, 0))
    assert run(search) == SearchState.SUCCEEDED
    path = positions(search.solution())
    assert not set(path) & set(walls)
    assert all(adjacent(a, b) for a, b in zip(path, path[1:]))
    assert search.solution_cost() == 12.0
    assert search.solution_cost() == len(path) - 1


def test_zero_heuristic_finds_same_cost():
    walls = [(1, 1), (2, 1), (3, 1), (3, 2), (3, 3)]
    grid = Grid(6, 6, walls)
    costs = []
    for heuristic in (True, False):
        search = AStarSearch()
        search.set_start_and_goal_states(
            Cell(grid, 0, 0, heuristic), Cell(grid, 5, 5, heuristic)
        )
        assert run(search) == SearchState.SUCCEEDED
        costs.append(search.solution_cost())
    assert costs[0] == costs[1]


def test_solution_reversed_mirrors_solution():
    grid = Grid(4, 4, [(1, 0), (1, 1)])
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 3, 0))
    assert run(search) == SearchState.SUCCEEDED
    assert positions(search.solution_reversed()) == list(reversed(positions(search.solution())))


def test_unreachable_goal_fails():
    grid = Grid(5, 5, [(3, y) for y in range(5)])
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 4, 4))
    assert run(search) == SearchState.FAILED
    assert search.solution() == []
    assert math.isinf(search.solution_cost())


def test_start_is_goal():
    grid = Grid(3, 3)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 1, 1), Cell(grid, 1, 1))
    assert search.search_step() == SearchState.SUCCEEDED
    assert positions(search.solution()) == [(1, 1)]
    assert search.solution_cost() == 0.0
    assert search.step_count() == 1


def test_cancel_makes_search_fail():
    grid = Grid(5, 5)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 4, 4))
    search.search_step()
    search.cancel_search()
    assert search.search_step() == SearchState.FAILED
    assert search.open_list() == []


def test_step_before_start_raises():
    with pytest.raises(RuntimeError):
        AStarSearch().search_step()


def test_stepping_after_success_is_stable():
    grid = Grid(4, 4)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 2, 2))
    assert run(search) == SearchState.SUCCEEDED
    steps = search.step_count()
    assert search.search_step() == SearchState.SUCCEEDED
    assert search.step_count() == steps


def test_cost_before_success_is_infinite():
    grid = Grid(4, 4)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 3, 3))
    assert math.isinf(search.solution_cost())
    assert search.solution() == []


def test_out_of_memory_when_node_limit_reached():
    grid = Grid(5, 5)
    search = AStarSearch(max_nodes=3)
    search.set_start_and_goal_states(GreedyCell(grid, 2, 2), GreedyCell(grid, 4, 4))
    assert search.search_step() == SearchState.OUT_OF_MEMORY
    assert search.solution() == []


def test_node_limit_too_small_for_start_and_goal():
    grid = Grid(2, 2)
    search = AStarSearch(max_nodes=1)
    with pytest.raises(MemoryError):
        search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 1, 1))


def test_open_and_closed_lists_after_first_step():
    grid = Grid(5, 5)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 2, 2), Cell(grid, 4, 4))
    assert positions(e.state for e in search.open_list()) == [(2, 2)]
    search.search_step()
    closed = search.closed_list()
    assert [e.state.pos for e in closed] == [(2, 2)]
    entries = search.open_list()
    assert len(entries) == 4
    for entry in entries:
        assert entry.f == entry.g + entry.h
        assert entry.g == 1.0
        assert adjacent(entry.state.pos, (2, 2))


def test_search_can_be_restarted():
    grid = Grid(5, 5)
    search = AStarSearch()
    search.set_start_and_goal_states(Cell(grid, 0, 0), Cell(grid, 1, 0))
    assert run(search) == SearchState.SUCCEEDED
    search.set_start_and_goal_states(Cell(grid, 4, 4), Cell(grid, 4, 2))
    assert search.step_count() == 0
    assert run(search) == SearchState.SUCCEEDED
    path = positions(search.solution())
    assert path[0] == (4, 4)
    assert path[-1] == (4, 2)