from collections import OrderedDict

from colorama import Fore

from utils import log_with_time

CACHE_DISABLED = False

# LRU cache using OrderedDict
MAX_CACHE_SIZE = 50000
class LRUCache(OrderedDict):
    def __init__(self, maxsize=MAX_CACHE_SIZE, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.maxsize = maxsize
    def __getitem__(self, key):
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value
    def __setitem__(self, key, value):
        if key in self:
            self.move_to_end(key)
        super().__setitem__(key, value)
        if len(self) > self.maxsize:
            oldest = next(iter(self))
            del self[oldest]


def single_deletions(word):
    """Yield ``word`` with each character removed in turn, left to right."""
    for pos in range(len(word)):
        yield word[:pos] + word[pos + 1:]


def dictionary_deletions(word, dictionary):
    """One-character deletions of ``word`` that are in ``dictionary``, left to right.

    A doubled letter gives the same deletion twice; both are returned.
    """
    return tuple(c for c in single_deletions(word) if c in dictionary)


class DeletionCache:
    """Memoizes :func:`dictionary_deletions` for one dictionary.

    The same word is often reached through several branches of a search, so
    its deletions only need computing once. A cache must not outlive the
    dictionary it was filled from; searches create one each by default.
    """

    def __init__(self, dictionary, maxsize=None):
        self.dictionary = dictionary
        self._cache = LRUCache(MAX_CACHE_SIZE if maxsize is None else maxsize)
        self.hits = 0
        self.misses = 0

    def deletions(self, word):
        if CACHE_DISABLED:
            return dictionary_deletions(word, self.dictionary)

        if word in self._cache:
            self.hits += 1
            return self._cache[word]

        self.misses += 1
        val = dictionary_deletions(word, self.dictionary)
        self._cache[word] = val
        return val

    def __len__(self):
        return len(self._cache)

    def print_summary(self, label=""):
        prefix = f"[CACHE SUMMARY{' ' + label if label else ''}]"
        log_with_time(f"{prefix} Cached words: {len(self._cache)}", color=Fore.CYAN)
        log_with_time(f"{prefix} Cache hits: {self.hits}", color=Fore.CYAN)
        log_with_time(f"{prefix} Cache misses: {self.misses}", color=Fore.CYAN)
