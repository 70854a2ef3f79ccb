# --- chain.py ---
# Longest deletion chains: each word in a chain is its predecessor with one
# character removed, and every word after the first is in the dictionary.

import time
from typing import Iterable, List, Optional, Tuple

from utils import vlog
from chain_cache import DeletionCache, dictionary_deletions
import chain_cache


class Node:
    """One string reached during a search. Links only point child -> parent."""

    __slots__ = ("value", "parent", "depth")

    def __init__(self, value: str, parent: Optional["Node"] = None):
        self.value = value
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1

    def key(self) -> Tuple[str, int]:
        # Same value under a different parent is a different branch.
        return (self.value, id(self.parent))

    def __repr__(self):
        return f"Node({self.value!r}, depth={self.depth})"


def _deletions_of(value, dictionary, cache):
    if cache is None:
        return dictionary_deletions(value, dictionary)
    return cache.deletions(value)


def expand_frontier(frontier: Iterable[Node], dictionary, cache: Optional[DeletionCache] = None) -> List[Node]:
    """Return the next generation of ``frontier``.

    Every one-character deletion of every node's value that is in
    ``dictionary`` becomes a child of that node. Repeated values under one
    parent collapse to a single child.
    """
    next_frontier = []
    seen = set()
    for node in frontier:
        for candidate in _deletions_of(node.value, dictionary, cache):
            child = Node(candidate, node)
            k = child.key()
            if k in seen:
                continue
            seen.add(k)
            next_frontier.append(child)
    return next_frontier


def find_terminal_frontier(word: str, dictionary, max_depth: Optional[int] = None,
                           cache: Optional[DeletionCache] = None) -> Tuple[List[Node], int]:
    """Expand generations from ``word`` until one comes back empty.

    Returns ``(terminal_frontier, expansions)`` where the frontier is the
    last non-empty generation. With ``max_depth`` the search stops after that
    many successful generations even if it could continue.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    frontier = [Node(word)]
    expansions = 0
    while max_depth is None or frontier[0].depth < max_depth:
        t0 = time.time()
        nxt = expand_frontier(frontier, dictionary, cache)
        expansions += 1
        if not nxt:
            break
        vlog(f"'{word}' generation {nxt[0].depth}: {len(nxt)} node(s)", t0)
        frontier = nxt
    return frontier, expansions


def path_from_root(node: Node) -> Tuple[str, ...]:
    """Values from the root down to ``node``, root first."""
    path = []
    while node is not None:
        path.append(node.value)
        node = node.parent
    path.reverse()
    return tuple(path)


def paths_from_root(nodes: Iterable[Node]) -> List[Tuple[str, ...]]:
    return [path_from_root(n) for n in nodes]


def build_chains(word: str, dictionary, max_depth: Optional[int] = None,
                 cache: Optional[DeletionCache] = None) -> List[Tuple[str, ...]]:
    """All longest deletion chains starting at ``word``.

    ``word`` itself does not have to be in ``dictionary``. When no deletion
    of it is a dictionary word the result is ``[(word,)]``.
    """
    if cache is None and not chain_cache.CACHE_DISABLED:
        cache = DeletionCache(dictionary)
    t0 = time.time()
    leaves, expansions = find_terminal_frontier(word, dictionary, max_depth=max_depth, cache=cache)
    chains = paths_from_root(leaves)
    vlog(f"'{word}': {len(chains)} chain(s) of length {len(chains[0])} after {expansions} expansion(s)", t0)
    return chains
