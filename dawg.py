# dawg.py
# Compact trie used as a word membership oracle for chain searches.
# Nodes are kept in a flat list and addressed by index, so sharing one
# trie across searches never copies or mutates it.

from typing import Dict, Iterable, List, Optional


class WordTrie:
    """
    Index-addressed trie with the membership API the chain search needs:
      - WordTrie.build(words) -> WordTrie
      - is_word(str) -> bool, also available as ``word in trie``
    Internals:
      nodes: List[{'term': bool, 'edges': Dict[str, int]}]
      node 0 is the root.
    """

    __slots__ = ("_nodes", "_count")

    def __init__(self, nodes: List[Dict], count: int = 0):
        # nodes[i] = {'term': bool, 'edges': {char: child_index}}
        self._nodes = nodes
        self._count = count

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "WordTrie":
        """
        Build a trie from the given words, stored exactly as given.
        Duplicates are counted once.
        """
        nodes: List[Dict[str, object]] = [{"term": False, "edges": {}}]  # root at 0
        count = 0

        for w in words:
            cur = 0
            for ch in w:
                edges: Dict[str, int] = nodes[cur]["edges"]  # type: ignore[assignment]
                nxt = edges.get(ch)
                if nxt is None:
                    nodes.append({"term": False, "edges": {}})
                    nxt = len(nodes) - 1
                    edges[ch] = nxt
                cur = nxt
            if not nodes[cur]["term"]:
                nodes[cur]["term"] = True
                count += 1

        return cls(nodes, count)

    def is_word(self, s: str) -> bool:
        """True if s was inserted as a word."""
        idx = self._walk(s)
        return (idx is not None) and bool(self._nodes[idx]["term"])

    def __contains__(self, s) -> bool:
        return isinstance(s, str) and self.is_word(s)

    def __len__(self) -> int:
        return self._count

    # ---------- Helpers ----------
    def _walk(self, s: str) -> Optional[int]:
        """Return node index after consuming s, or None if no such path."""
        idx = 0
        nodes = self._nodes
        for ch in s:
            edges: Dict[str, int] = nodes[idx]["edges"]  # type: ignore[assignment]
            nxt = edges.get(ch)
            if nxt is None:
                return None
            idx = nxt
        return idx
