"""Least-cost paths from one node of a weighted directed graph."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

DATA_FILE = "airports.dat"
START_NODE = 0
INF = 9999999


@dataclass
class Graph:
    """A directed graph as a cost matrix; a cost of 0 means no edge."""

    node_count: int
    costs: list[list[int]]


def parse_graph(text: str) -> Graph:
    """Parse 'nodes edges' followed by 'from to cost' triples."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"graph data holds a non-integer: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("graph data must start with node and edge counts")
    node_count, edge_count = numbers[0], numbers[1]
    if node_count < 0 or edge_count < 0:
        raise ValueError("node and edge counts must not be negative")
    triples = numbers[2:]
    if len(triples) < 3 * edge_count:
        raise ValueError(f"expected {edge_count} edges, data ends early")

    costs = [[0] * node_count for _ in range(node_count)]
    for offset in range(0, 3 * edge_count, 3):
        source, target, cost = triples[offset : offset + 3]
        if not (0 <= source < node_count and 0 <= target < node_count):
            raise ValueError(f"edge {source} -> {target} names an unknown node")
        costs[source][target] = cost
    return Graph(node_count, costs)


def load_graph(path: str | Path) -> Graph:
    """Read and parse a graph file."""
    return parse_graph(Path(path).read_text())


def _closest_unvisited(distances: list[int], visited: list[bool]) -> int | None:
    candidates = [
        node
        for node, distance in enumerate(distances)
        if not visited[node] and distance < INF
    ]
    if not candidates:
        return None
    return min(candidates, key=distances.__getitem__)


def shortest_paths(graph: Graph, start: int = START_NODE) -> tuple[list[int], list[int]]:
    """Return (distances, previous) for every node reached from start.

    Unreached nodes have distance INF and previous -1; the start node is its
    own previous node.
    """
    count = graph.node_count
    if not 0 <= start < count:
        raise ValueError(f"start node {start} is not in the graph")
    distances = [INF] * count
    previous = [-1] * count
    visited = [False] * count
    distances[start] = 0

    for _ in range(count - 1):
        node = _closest_unvisited(distances, visited)
        if node is None:
            break
        visited[node] = True
        for target, cost in enumerate(graph.costs[node]):
            if (
                not visited[target]
                and cost
                and distances[node] != INF
                and distances[node] + cost < distances[target]
            ):
                distances[target] = distances[node] + cost
                previous[target] = node

    previous[start] = start
    return distances, previous


def format_paths(distances: list[int], previous: list[int], start: int = START_NODE) -> str:
    """Return the report of path costs and previous nodes."""
    lines = [f"Shortest path costs from node {start}:"]
    lines.extend(
        f"To node {node}: {distance}, Previous node: {before}"
        for node, (distance, before) in enumerate(zip(distances, previous))
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print least-cost paths from the start node of a graph file."""
    parser = argparse.ArgumentParser(
        prog="dijkstra", description="Find least-cost paths in a weighted graph."
    )
    parser.add_argument("path", nargs="?", default=DATA_FILE, help="graph data file")
    parser.add_argument("--start", type=int, default=START_NODE, help="start node")
    args = parser.parse_args(argv)

    try:
        graph = load_graph(args.path)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        distances, previous = shortest_paths(graph, args.start)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(format_paths(distances, previous, args.start))
    return 0


if __name__ == "__main__":
    sys.exit(main())