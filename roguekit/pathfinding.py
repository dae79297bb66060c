"""Path finding over user-defined maps, built on the A* search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable

from roguekit.astar import AStarSearch, AStarState, SearchState


class Navigator(ABC):
    """Describes a map to the path finder.

    Locations may be any values; the navigator decides how they relate.
    """

    @abstractmethod
    def get_distance_estimate(self, pos: Any, goal: Any) -> float:
        """Heuristic estimate of the cost from pos to goal."""

    def is_goal(self, pos: Any, goal: Any) -> bool:
        """True if pos is the goal; defaults to is_same_state."""
        return self.is_same_state(pos, goal)

    @abstractmethod
    def get_successors(self, pos: Any) -> Iterable[Any]:
        """Locations reachable in one step from pos."""

    @abstractmethod
    def get_cost(self, pos: Any, successor: Any) -> float:
        """Cost of stepping from pos to successor."""

    def is_same_state(self, pos: Any, other: Any) -> bool:
        """True if pos and other are the same location; defaults to equality."""
        return pos == other


@dataclass
class NavigationPath:
    """Result of a path search: whether it worked, where to, and the steps."""

    success: bool = False
    destination: Any = None
    steps: deque = field(default_factory=deque)


@dataclass(eq=False)
class MapSearchNode(AStarState):
    """A search state that forwards every question to a navigator."""

    pos: Any
    navigator: Navigator

    def goal_distance_estimate(self, goal: MapSearchNode) -> float:
        return self.navigator.get_distance_estimate(self.pos, goal.pos)

    def is_goal(self, goal: MapSearchNode) -> bool:
        return self.navigator.is_goal(self.pos, goal.pos)

    def get_successors(self, search: AStarSearch, parent: MapSearchNode | None) -> bool:
        if parent is None:
            raise RuntimeError("Null parent error.")
        for location in self.navigator.get_successors(self.pos):
            search.add_successor(MapSearchNode(location, self.navigator))
        return True

    def get_cost(self, successor: MapSearchNode) -> float:
        return self.navigator.get_cost(self.pos, successor.pos)

    def is_same_state(self, other: MapSearchNode) -> bool:
        return self.navigator.is_same_state(self.pos, other.pos)


def find_path(start: Any, end: Any, navigator: Navigator) -> NavigationPath:
    """Find a path from start to end with A*.

    The returned steps exclude the start location and end with the destination.
    """
    search = AStarSearch()
    search.set_start_and_goal_states(
        MapSearchNode(start, navigator), MapSearchNode(end, navigator)
    )
    state = search.search_step()
    while state == SearchState.SEARCHING:
        state = search.search_step()

    if state == SearchState.SUCCEEDED:
        steps = deque(node.pos for node in search.solution()[1:])
        return NavigationPath(success=True, destination=end, steps=steps)
    return NavigationPath()