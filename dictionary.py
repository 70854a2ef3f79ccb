import time

import requests

from utils import log_with_time, vlog
from dawg import WordTrie


def _is_url(source):
    return source.startswith(("http://", "https://"))


def parse_word_list(text, case_insensitive=False):
    """Split a newline delimited word list into words, skipping blank lines."""
    words = []
    for line in text.splitlines():
        w = line.strip()
        if not w:
            continue
        words.append(w.lower() if case_insensitive else w)
    return words


def read_word_list(source):
    """Return the raw text of the word list at ``source`` (a path or an http(s) URL)."""
    if _is_url(source):
        log_with_time("⟳ Downloading dictionary…")
        resp = requests.get(source, timeout=30)
        resp.raise_for_status()
        return resp.text
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def load_dictionary(source, case_insensitive=False, use_trie=False):
    """Load the word list at ``source`` as a read-only membership oracle.

    Returns a ``frozenset`` of words, or a :class:`WordTrie` when
    ``use_trie`` is set. Raises ``FileNotFoundError`` for a missing file and
    ``requests.HTTPError`` for a failed download.
    """
    t0 = time.time()
    words = parse_word_list(read_word_list(source), case_insensitive=case_insensitive)
    dictionary = WordTrie.build(words) if use_trie else frozenset(words)
    vlog(f"Dictionary loaded from {source} ({len(dictionary)} words)", t0)
    return dictionary
