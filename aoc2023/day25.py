"""Snowverload: splitting a wiring graph by cutting three wires."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

_CUTS = 3


@dataclass
class Graph:
    """Undirected multigraph; each adjacency entry is (edge id, neighbour)."""

    adjacency: dict[str, list[tuple[int, str]]] = field(default_factory=dict)
    edge_count: int = 0

    def _remove_shortest_path(self, source: str, dest: str, used: set[int]) -> bool:
        """Find a path over unused edges by breadth-first search and mark its edges used."""
        queue: deque[tuple] = deque([(source, None, None)])
        traveled: set[str] = set()
        while queue:
            item = queue.popleft()
            node = item[0]
            if node == dest:
                while item[1] is not None:
                    used.add(item[1])
                    item = item[2]
                return True
            for edge, neighbour in self.adjacency[node]:
                if edge in used or neighbour in traveled:
                    continue
                traveled.add(neighbour)
                queue.append((neighbour, edge, item))
        return False

    def _cut_paths(self, source: str, dest: str, paths: int) -> bool:
        used: set[int] = set()
        return all(self._remove_shortest_path(source, dest, used) for _ in range(paths))

    def split(self, cuts: int) -> tuple[list[str], list[str]]:
        """Nodes joined to the first node by more than ``cuts`` paths, and the rest."""
        if not self.adjacency:
            raise ValueError("empty graph")
        source = next(iter(self.adjacency))
        joined, apart = [source], []
        for dest in self.adjacency:
            if dest == source:
                continue
            if self._cut_paths(source, dest, cuts + 1):
                joined.append(dest)
            else:
                apart.append(dest)
        return joined, apart


def parse_graph(lines: list[str]) -> Graph:
    """Parse 'name: other other ...' lines into an undirected graph."""
    graph = Graph()
    for line in lines:
        name, _, _ = line.partition(": ")
        graph.adjacency[name] = []
    for line in lines:
        name, _, others = line.partition(": ")
        for other in others.split(" "):
            graph.adjacency.setdefault(other, [])
            edge = graph.edge_count
            graph.edge_count += 1
            graph.adjacency[name].append((edge, other))
            graph.adjacency[other].append((edge, name))
    return graph


def snowverload_part1(lines: list[str]) -> int:
    """Product of the two group sizes after cutting three wires."""
    first, second = parse_graph(lines).split(_CUTS)
    return len(first) * len(second)