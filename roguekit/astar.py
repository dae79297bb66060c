"""Generic A* search over user-defined states."""

from __future__ import annotations

import heapq
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NamedTuple

DEFAULT_MAX_NODES = 10000


class SearchState(IntEnum):
    """Progress of an A* search."""

    NOT_INITIALISED = 0
    SEARCHING = 1
    SUCCEEDED = 2
    FAILED = 3
    OUT_OF_MEMORY = 4
    INVALID = 5


class AStarState(ABC):
    """Interface a state must provide to be searched."""

    @abstractmethod
    def goal_distance_estimate(self, goal: Any) -> float:
        """Heuristic estimate of the cost from this state to goal."""

    @abstractmethod
    def is_goal(self, goal: Any) -> bool:
        """True if this state is the goal."""

    @abstractmethod
    def get_successors(self, search: AStarSearch, parent: Any | None) -> bool:
        """Add every successor via search.add_successor; return False on failure."""

    @abstractmethod
    def get_cost(self, successor: Any) -> float:
        """Cost of moving from this state to successor."""

    @abstractmethod
    def is_same_state(self, other: Any) -> bool:
        """True if this state equals other."""


@dataclass(eq=False)
class _Node:
    state: Any
    parent: _Node | None = None
    child: _Node | None = None
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0

    def __lt__(self, other: _Node) -> bool:
        return self.f < other.f


class ListEntry(NamedTuple):
    """A state on the open or closed list with its search scores."""

    state: Any
    f: float
    g: float
    h: float


class AStarSearch:
    """Step-wise A* search with a bounded number of live nodes."""

    def __init__(self, max_nodes: int = DEFAULT_MAX_NODES) -> None:
        self.max_nodes = max_nodes
        self._state = SearchState.NOT_INITIALISED
        self._open: list[_Node] = []
        self._closed: list[_Node] = []
        self._successors: list[_Node] = []
        self._start: _Node | None = None
        self._goal: _Node | None = None
        self._allocated = 0
        self._steps = 0
        self._cancel_request = False

    def _allocate(self, state: Any) -> _Node | None:
        if self._allocated >= self.max_nodes:
            return None
        self._allocated += 1
        return _Node(state)

    def _free(self, node: _Node) -> None:
        self._allocated -= 1

    def cancel_search(self) -> None:
        """Make the next step fail and release the search nodes."""
        self._cancel_request = True

    def set_start_and_goal_states(self, start: Any, goal: Any) -> None:
        """Begin a new search from start towards goal."""
        self._cancel_request = False
        self._open = []
        self._closed = []
        self._successors = []
        self._allocated = 0
        start_node = self._allocate(start)
        goal_node = self._allocate(goal)
        if start_node is None or goal_node is None:
            raise MemoryError("node limit too small to hold start and goal")
        self._start = start_node
        self._goal = goal_node
        self._state = SearchState.SEARCHING

        start_node.g = 0.0
        start_node.h = start.goal_distance_estimate(goal)
        start_node.f = start_node.g + start_node.h
        start_node.parent = start_node
        heapq.heappush(self._open, start_node)
        self._steps = 0

    def search_step(self) -> SearchState:
        """Advance the search by one node expansion and return its state."""
        if self._state in (SearchState.NOT_INITIALISED, SearchState.INVALID):
            raise RuntimeError("search has not been initialised")
        if self._state in (SearchState.SUCCEEDED, SearchState.FAILED):
            return self._state

        if not self._open or self._cancel_request:
            self._free_all_nodes()
            self._state = SearchState.FAILED
            return self._state

        self._steps += 1
        start, goal = self._start, self._goal
        n = heapq.heappop(self._open)

        if n.state.is_goal(goal.state):
            goal.parent = n.parent
            goal.g = n.g
            if not n.state.is_same_state(start.state):
                self._free(n)
                child, parent = goal, goal.parent
                while True:
                    parent.child = child
                    child, parent = parent, parent.parent
                    if child is start:
                        break
            self._free_unused_nodes()
            self._state = SearchState.SUCCEEDED
            return self._state

        self._successors = []
        parent_state = n.parent.state if n.parent is not None else None
        if not n.state.get_successors(self, parent_state):
            for successor in self._successors:
                self._free(successor)
            self._successors = []
            self._free_all_nodes()
            self._state = SearchState.OUT_OF_MEMORY
            return self._state

        for successor in self._successors:
            new_g = n.g + n.state.get_cost(successor.state)

            on_open = self._find(self._open, successor)
            if on_open is not None and on_open.g <= new_g:
                self._free(successor)
                continue

            on_closed = self._find(self._closed, successor)
            if on_closed is not None and on_closed.g <= new_g:
                self._free(successor)
                continue

            successor.parent = n
            successor.g = new_g
            successor.h = successor.state.goal_distance_estimate(goal.state)
            successor.f = successor.g + successor.h

            if on_closed is not None:
                self._free(on_closed)
                self._closed.remove(on_closed)

            if on_open is not None:
                self._free(on_open)
                self._open.remove(on_open)
                heapq.heapify(self._open)

            heapq.heappush(self._open, successor)

        self._closed.append(n)
        return self._state

    @staticmethod
    def _find(nodes: list[_Node], target: _Node) -> _Node | None:
        return next((node for node in nodes if node.state.is_same_state(target.state)), None)

    def add_successor(self, state: Any) -> bool:
        """Queue a successor of the node being expanded; False if out of nodes."""
        node = self._allocate(state)
        if node is None:
            return False
        self._successors.append(node)
        return True

    def solution(self) -> list[Any]:
        """States from start to goal, or an empty list without a solution."""
        if self._state != SearchState.SUCCEEDED:
            return []
        result = [self._start.state]
        node = self._start.child
        while node is not None:
            result.append(node.state)
            node = node.child
        return result

    def solution_reversed(self) -> list[Any]:
        """States from goal back to start, or an empty list without a solution."""
        if self._state != SearchState.SUCCEEDED:
            return []
        result = [self._goal.state]
        node = self._goal
        while node is not self._start:
            node = node.parent
            result.append(node.state)
        return result

    def solution_cost(self) -> float:
        """Total cost of the solution, or infinity if there is none."""
        if self._goal is not None and self._state == SearchState.SUCCEEDED:
            return self._goal.g
        return math.inf

    def open_list(self) -> list[ListEntry]:
        """Snapshot of the open list in storage order."""
        return [ListEntry(n.state, n.f, n.g, n.h) for n in self._open]

    def closed_list(self) -> list[ListEntry]:
        """Snapshot of the closed list in storage order."""
        return [ListEntry(n.state, n.f, n.g, n.h) for n in self._closed]

    def step_count(self) -> int:
        """Number of expansion steps taken so far."""
        return self._steps

    def _free_all_nodes(self) -> None:
        for node in self._open:
            self._free(node)
        self._open = []
        for node in self._closed:
            self._free(node)
        self._closed = []
        if self._goal is not None:
            self._free(self._goal)

    def _free_unused_nodes(self) -> None:
        for node in self._open:
            if node.child is None:
                self._free(node)
        self._open = []
        for node in self._closed:
            if node.child is None:
                self._free(node)
        self._closed = []