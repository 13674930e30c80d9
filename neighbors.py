import time
from typing import Dict, Set, Tuple

from utils import ALPHABET, vlog
from wordset import WordSet


Graph = Dict[str, Set[str]]


def compute_neighbors(word: str, wordset: WordSet, alphabet: str = ALPHABET) -> Set[str]:
    """Return every word of ``wordset`` reachable from ``word`` by one substitution."""
    neighbors = set()
    letters = list(word)
    for i, original in enumerate(letters):
        for ch in alphabet:
            if ch == original:
                continue
            letters[i] = ch
            candidate = "".join(letters)
            if candidate in wordset:
                neighbors.add(candidate)
        letters[i] = original
    return neighbors


def build_graph(wordset: WordSet, alphabet: str = ALPHABET) -> Graph:
    """Map each word to its neighbor set.

    Every word gets an entry, isolated words map to an empty set, so a
    missing key always means the word is not part of the graph.
    """
    t0 = time.time()
    graph: Graph = {}
    for word in wordset:
        graph[word] = compute_neighbors(word, wordset, alphabet)
    vlog(f"Neighbor graph built ({len(graph)} words)", t0)
    return graph


def graph_stats(graph: Graph) -> Tuple[int, int, int]:
    """Return (words, edges, isolated words); each edge is counted once."""
    degree_sum = sum(len(n) for n in graph.values())
    isolated = sum(1 for n in graph.values() if not n)
    return len(graph), degree_sum // 2, isolated
