# dict_codec.py
# Line-oriented persistence for neighbor graphs:
#   <word>[ <neighbor1> <neighbor2> ...]\n

import time
from typing import Iterable, Iterator

from errors import MalformedLine
from neighbors import Graph
from utils import vlog


def dump_graph(graph: Graph) -> Iterator[str]:
    """Yield one line per word. Output is sorted so it is reproducible."""
    for word in sorted(graph):
        yield " ".join([word, *sorted(graph[word])]) + "\n"


def load_graph(lines: Iterable[str]) -> Graph:
    """Parse dictionary lines back into a graph.

    Raises MalformedLine for blank lines, duplicate entries, a word listing
    itself, or a neighbor that has no entry of its own.
    """
    graph: Graph = {}
    first_seen = {}
    for lineno, line in enumerate(lines, 1):
        text = line.rstrip("\r\n")
        tokens = text.split()
        if not tokens:
            raise MalformedLine(lineno, text)
        word, neighbors = tokens[0], set(tokens[1:])
        if word in graph:
            raise MalformedLine(lineno, text, f"duplicate entry for '{word}'")
        if word in neighbors:
            raise MalformedLine(lineno, text, f"'{word}' lists itself as a neighbor")
        graph[word] = neighbors
        for n in neighbors:
            first_seen.setdefault(n, (lineno, text))

    for n, (lineno, text) in first_seen.items():
        if n not in graph:
            raise MalformedLine(lineno, text, f"neighbor '{n}' has no entry")
    return graph


def write_dictionary(graph: Graph, path):
    t0 = time.time()
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.writelines(dump_graph(graph))
    vlog(f"Dictionary written to {path} ({len(graph)} words)", t0)


def read_dictionary(path) -> Graph:
    t0 = time.time()
    with open(path, "r", encoding="utf-8") as f:
        graph = load_graph(f)
    vlog(f"Dictionary {path} loaded ({len(graph)} words)", t0)
    return graph


def looks_like_dictionary(path) -> bool:
    """True when some line carries neighbors, i.e. the file is a dictionary."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return any(" " in line.strip() for line in f)
