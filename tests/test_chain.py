import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import chain
import chain_cache
from chain import Node, expand_frontier, find_terminal_frontier, path_from_root, paths_from_root, build_chains
from chain_cache import DeletionCache

STARTING_WORDS = {"starting", "stating", "statin", "satin", "sati", "sat", "at", "a"}


def is_single_deletion(longer, shorter):
    return any(longer[:p] + longer[p + 1:] == shorter for p in range(len(longer)))


def assert_valid_chains(chains, dictionary):
    for c in chains:
        for prev, nxt in zip(c, c[1:]):
            assert len(nxt) == len(prev) - 1
            assert is_single_deletion(prev, nxt)
            assert nxt in dictionary
        last = c[-1]
        assert not any(last[:p] + last[p + 1:] in dictionary for p in range(len(last)))


@pytest.fixture(autouse=True)
def cache_enabled(monkeypatch):
    monkeypatch.setattr(chain_cache, "CACHE_DISABLED", False)


def test_starting_chain():
    chains = build_chains("starting", STARTING_WORDS)
    assert ("starting", "stating", "statin", "satin", "sati", "sat", "at", "a") in chains
    assert_valid_chains(chains, STARTING_WORDS)


def test_no_valid_deletion_returns_root_only():
    # "a" is in the dictionary but is two deletions away from "cat"
    assert build_chains("cat", {"a"}) == [("cat",)]
    assert build_chains("cat", {"cat", "a", "t"}) == [("cat",)]


def test_empty_input():
    assert build_chains("", STARTING_WORDS) == [("",)]
    assert build_chains("", set()) == [("",)]


def test_whole_frontier_excludes_shorter_branch():
    # "bt" dies a generation before "a", so only the bat => at => a chain survives
    assert build_chains("bat", {"bat", "at", "bt", "a"}) == [("bat", "at", "a")]


def test_ties_are_all_returned():
    dictionary = {"at", "bt", "a", "b"}
    chains = build_chains("bat", dictionary)
    assert sorted(chains) == [("bat", "at", "a"), ("bat", "bt", "b")]
    assert_valid_chains(chains, dictionary)


def test_same_value_under_different_parents_kept():
    # "a" is reachable from both "ab" and "ca"
    chains = build_chains("cab", {"ab", "ca", "a"})
    assert sorted(chains) == [("cab", "ab", "a"), ("cab", "ca", "a")]


def test_root_need_not_be_in_dictionary():
    dictionary = {"at", "a"}
    assert "bat" not in dictionary
    assert build_chains("bat", dictionary) == [("bat", "at", "a")]


def test_expand_frontier_dedupes_per_parent():
    root = Node("aab")
    children = expand_frontier([root], {"ab", "aa"})
    # deleting either "a" gives "ab"; it appears once
    assert [c.value for c in children] == ["ab", "aa"]
    assert all(c.parent is root for c in children)


def test_expand_frontier_dedupes_per_parent_with_cache():
    dictionary = {"ab", "aa"}
    cache = DeletionCache(dictionary)
    assert cache.deletions("aab") == ("ab", "ab", "aa")
    children = expand_frontier([Node("aab")], dictionary, cache)
    assert [c.value for c in children] == ["ab", "aa"]


def test_expand_frontier_empty():
    assert expand_frontier([Node("xyz")], {"ab"}) == []
    assert expand_frontier([], {"ab"}) == []


def test_node_depth_and_key():
    root = Node("cab")
    left = Node("ab", root)
    leaf_a = Node("a", left)
    leaf_b = Node("a", Node("ca", root))
    assert leaf_a.depth == 2
    assert leaf_a.key() != leaf_b.key()
    assert root.parent is None


def test_path_reconstruction_is_idempotent():
    root = Node("sat")
    leaf = Node("a", Node("at", root))
    assert path_from_root(leaf) == ("sat", "at", "a")
    assert path_from_root(leaf) == path_from_root(leaf)
    assert paths_from_root([leaf, root]) == [("sat", "at", "a"), ("sat",)]


def test_termination_bound(monkeypatch):
    calls = []
    orig = chain.expand_frontier

    def counting_expand(frontier, dictionary, cache=None):
        calls.append(1)
        return orig(frontier, dictionary, cache)

    monkeypatch.setattr(chain, "expand_frontier", counting_expand)
    leaves, expansions = find_terminal_frontier("starting", STARTING_WORDS)
    assert expansions == len(calls) == 8
    assert expansions <= len("starting") + 1
    assert [n.value for n in leaves] == ["a"]


def test_max_depth_limits_search():
    leaves, _ = find_terminal_frontier("starting", STARTING_WORDS, max_depth=3)
    assert {n.value for n in leaves} == {"satin"}
    assert build_chains("starting", STARTING_WORDS, max_depth=0) == [("starting",)]
    with pytest.raises(ValueError):
        find_terminal_frontier("starting", STARTING_WORDS, max_depth=-1)


def test_cache_does_not_change_results(monkeypatch):
    dictionary = {"abcd", "abc", "abd", "acd", "bcd", "ab", "ac", "bc", "a", "b", "c"}
    with_cache = build_chains("abcd", dictionary, cache=DeletionCache(dictionary))
    monkeypatch.setattr(chain_cache, "CACHE_DISABLED", True)
    without_cache = build_chains("abcd", dictionary)
    assert sorted(with_cache) == sorted(without_cache)
    assert_valid_chains(with_cache, dictionary)
    assert all(len(c) == 4 for c in with_cache)
