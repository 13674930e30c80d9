# pathfinder.py
# Breadth-first shortest path over a neighbor graph.

from collections import deque
from typing import Dict, List, Optional

from errors import WordNotFound
from neighbors import Graph


def _check_words(graph: Graph, *words: str):
    missing = []
    for w in words:
        if w not in graph and w not in missing:
            missing.append(w)
    if missing:
        raise WordNotFound(missing)


def _walk_back(previous: Dict[str, Optional[str]], end: str) -> List[str]:
    path = []
    word: Optional[str] = end
    while word is not None:
        path.append(word)
        word = previous[word]
    path.reverse()
    return path


def find_path(graph: Graph, start: str, end: str) -> Optional[List[str]]:
    """
    Return a shortest path from ``start`` to ``end`` (both inclusive), or None
    when ``end`` is unreachable.

    Raises WordNotFound naming every query word missing from ``graph``.
    """
    _check_words(graph, start, end)
    if start == end:
        return [start]

    frontier = deque([start])
    visited = {start}
    # child -> the word that first discovered it; the start has no parent
    previous: Dict[str, Optional[str]] = {start: None}

    while frontier:
        word = frontier.popleft()
        for neighbor in graph[word]:
            if neighbor in visited:
                continue
            visited.add(neighbor)
            previous[neighbor] = word
            if neighbor == end:
                return _walk_back(previous, end)
            frontier.append(neighbor)
    return None


def distances(graph: Graph, start: str) -> Dict[str, int]:
    """Hop distance from ``start`` to every word reachable from it."""
    _check_words(graph, start)
    dist = {start: 0}
    frontier = deque([start])
    while frontier:
        word = frontier.popleft()
        for neighbor in graph[word]:
            if neighbor not in dist:
                dist[neighbor] = dist[word] + 1
                frontier.append(neighbor)
    return dist


def hops(path: List[str]) -> int:
    return len(path) - 1
