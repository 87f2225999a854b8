import argparse
import sys
import time
from itertools import islice

import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog
from index import build_index, index_stats
from search import AnagramEngine


DICT_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"

DEFAULT_MIN_LENGTH = 1
DEFAULT_MAX_WORDS = 5
PROMPT = "> "


def load_dictionary(path=None, url=DICT_URL):
    """Return the dictionary words in file order, blank lines dropped.

    Reads ``path`` when given, otherwise downloads the word list from ``url``.
    """
    t0 = time.time()
    if path is not None:
        log_with_time(f"⟳ Reading dictionary {path}…")
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip() for line in f if line.strip()]
    else:
        log_with_time("⟳ Downloading dictionary…")
        resp = requests.get(url, timeout=30)
        resp.raise_for_status()
        words = [w.strip() for w in resp.text.splitlines() if w.strip()]
    vlog(f"Dictionary loaded ({len(words)} words)", t0)
    log_with_time(f"✅ {len(words)} words")
    return words


def normalize_query(line):
    return "".join(line.split())


def format_group(group):
    if len(group) == 1:
        return group[0]
    return "[" + ", ".join(group) + "]"


def format_solution(solution):
    return " ".join(format_group(g) for g in solution)


def answer(engine, line, limit=None):
    """Print the solutions for one query line and return how many were printed."""
    letters = normalize_query(line)
    t0 = time.time()
    count = 0
    for solution in islice(engine.anagram(letters), limit):
        print(format_solution(solution), flush=True)
        count += 1
    vlog(f"{count} solution(s) for '{letters}'", t0)
    return count


def read_loop(engine, stream, limit=None):
    print(PROMPT, end="", flush=True)
    for line in stream:
        answer(engine, line, limit)
        print(PROMPT, end="", flush=True)


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def run_solver(argv=None):
    parser = argparse.ArgumentParser(description="Multi-word anagram solver")
    parser.add_argument("--dict", dest="dict_path", type=str, default=None,
                        help="Path to a word list, one word per line (default: download --dict-url)")
    parser.add_argument("--dict-url", type=str, default=DICT_URL, help="URL of the word list to download")
    parser.add_argument("--min-length", type=_positive_int, default=DEFAULT_MIN_LENGTH,
                        help=f"Minimum number of letters per word (default: {DEFAULT_MIN_LENGTH})")
    parser.add_argument("--max-words", type=_positive_int, default=DEFAULT_MAX_WORDS,
                        help=f"Maximum number of words per anagram (default: {DEFAULT_MAX_WORDS})")
    parser.add_argument("--limit", type=_positive_int, default=None,
                        help="Stop after this many anagrams per query (default: all)")
    parser.add_argument("--query", action="append", default=None,
                        help="Answer this query and exit instead of reading from stdin (repeatable)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    try:
        words = load_dictionary(args.dict_path, args.dict_url)
        t0 = time.time()
        log_with_time("⟳ Building index…")
        index = build_index(words)
    except FileNotFoundError:
        log_with_time(f"Could not find dictionary file: {args.dict_path}", color=Fore.RED)
        return 1
    except requests.RequestException as e:
        log_with_time(f"Error downloading dictionary: {e}", color=Fore.RED)
        return 1
    except (OSError, ValueError) as e:
        log_with_time(f"Error loading dictionary: {e}", color=Fore.RED)
        return 1

    stats = index_stats(index)
    vlog(f"Index has {stats.nodes} nodes", t0)
    log_with_time(f"✅ {stats.signatures} signatures from {stats.words} words", color=Fore.GREEN)
    if not stats.words:
        log_with_time("Dictionary is empty; no query can be answered.", color=Fore.YELLOW)

    engine = AnagramEngine(index, min_signature_length=args.min_length, max_word_count=args.max_words)

    if args.query:
        for q in args.query:
            print(f"{PROMPT}{q}")
            answer(engine, q, args.limit)
    else:
        read_loop(engine, sys.stdin, args.limit)

    vlog(f"Total elapsed: {time.time() - utils.start_time:.3f}s")
    return 0
