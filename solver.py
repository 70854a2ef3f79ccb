import argparse
import time
import concurrent.futures

import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog, log_chains_to_file
import chain_cache
from chain_cache import DeletionCache
from chain import build_chains
from dictionary import load_dictionary


DEFAULT_SEPARATOR = " => "
NOT_IN_DICTIONARY_WARNING = "Input word is not in the dictionary. Continuing with substrings."


def search_word(word, dictionary, max_depth=None):
    """Run one search with its own deletion cache. Returns (word, chains)."""
    cache = None if chain_cache.CACHE_DISABLED else DeletionCache(dictionary)
    chains = build_chains(word, dictionary, max_depth=max_depth, cache=cache)
    if utils.VERBOSE and cache is not None:
        cache.print_summary(word)
    return word, chains


def search_words(words, dictionary, max_depth=None, workers=None):
    """Search every word, in parallel when there is more than one.

    The dictionary is shared read-only; each search owns its own tree.
    Results come back in the order of ``words``.
    """
    if len(words) <= 1 or workers == 1:
        return [search_word(w, dictionary, max_depth) for w in words]
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(search_word, w, dictionary, max_depth) for w in words]
        return [f.result() for f in futures]


def format_chain(chain, separator=DEFAULT_SEPARATOR):
    return separator.join(chain)


def print_chains(word, chains, separator=DEFAULT_SEPARATOR):
    if len(chains[0]) == 1:
        log_with_time(f"No dictionary word can be made by deleting one character from '{word}'.", color=Fore.YELLOW)
    else:
        log_with_time(
            f"Found {len(chains)} longest chain(s) of {len(chains[0])} words for '{word}':", color=Fore.GREEN
        )
    for c in chains:
        print(format_chain(c, separator), flush=True)


def build_parser():
    parser = argparse.ArgumentParser(
        description="LingChain: longest chains of dictionary words made by deleting one character at a time"
    )
    parser.add_argument("dictionary", help="Path or http(s) URL of a word list with one word per line")
    parser.add_argument("words", nargs="+", help="Word(s) to start chains from, e.g. starting")
    parser.add_argument(
        "--separator", type=str, default=DEFAULT_SEPARATOR, help=f"Separator between chain words (default: '{DEFAULT_SEPARATOR}')"
    )
    parser.add_argument(
        "--max-depth", type=int, default=None, help="Stop after this many deletions even if chains could continue"
    )
    parser.add_argument("--case-insensitive", action="store_true", help="Lowercase the dictionary and input words")
    parser.add_argument("--trie", action="store_true", help="Hold the dictionary in a trie instead of a set")
    parser.add_argument("--workers", type=int, default=None, help="Threads used when several words are given")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--no-cache", action="store_true", help="Disable the per-search deletion cache")
    parser.add_argument("--log-chains", action="store_true", help="Save the longest chain for each word to a JSON log file")
    return parser


def run_solver(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_depth is not None and args.max_depth < 0:
        parser.error("--max-depth must be non-negative")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    chain_cache.CACHE_DISABLED = args.no_cache

    try:
        dictionary = load_dictionary(args.dictionary, case_insensitive=args.case_insensitive, use_trie=args.trie)
    except FileNotFoundError:
        log_with_time(f"Could not find dictionary file: {args.dictionary}", color=Fore.RED)
        return 1
    except requests.RequestException as e:
        log_with_time(f"Could not download dictionary: {e}", color=Fore.RED)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log_with_time(f"Error reading dictionary: {e}", color=Fore.RED)
        return 1

    words = [w.lower() for w in args.words] if args.case_insensitive else list(args.words)
    for w in words:
        if w not in dictionary:
            log_with_time(f"'{w}': {NOT_IN_DICTIONARY_WARNING}", color=Fore.YELLOW)

    t0 = time.time()
    results = search_words(words, dictionary, max_depth=args.max_depth, workers=args.workers)
    vlog(f"Searched {len(words)} word(s)", t0)

    for word, chains in results:
        print_chains(word, chains, args.separator)
        if args.log_chains:
            log_chains_to_file(word, chains)

    total_elapsed = time.time() - utils.start_time
    vlog(f"Total time: {total_elapsed:.3f}s")
    return 0


def main():
    raise SystemExit(run_solver())
