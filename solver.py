import argparse
import time

import requests
from colorama import Fore

import utils
from utils import ALPHABET, log_with_time, vlog, normalize_alphabet
from errors import InvalidEncoding, WordLadderError, WordNotFound
from wordset import open_words, is_url
from neighbors import build_graph, graph_stats
from pathfinder import find_path, distances, hops
from dict_codec import write_dictionary, read_dictionary, looks_like_dictionary
from extract import extract_words


def _alphabet_arg(value):
    try:
        return normalize_alphabet(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _non_negative(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"length must not be negative: {value}")
    return n


def build_parser():
    parser = argparse.ArgumentParser(
        prog="word-ladder",
        description="Find the shortest chain of single-letter substitutions between two words",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("extract-words", help="Extract words of a given length from a list of words")
    p.add_argument("--len", dest="length", type=_non_negative, required=True, help="Length of the extracted words")
    p.add_argument("words", help="Original list of words")
    p.add_argument("extracted_words", help="Output path")

    p = sub.add_parser("generate-dict", help="Build the neighbor dictionary of a word list")
    p.add_argument("--alphabet", type=_alphabet_arg, default=ALPHABET, help=f"Substitution alphabet (default: {ALPHABET})")
    p.add_argument("words", help="List of words of equal length (path or URL)")
    p.add_argument("dictionary", help="Output dictionary path")

    p = sub.add_parser("find-path", help="Find a path across two words")
    p.add_argument("--alphabet", type=_alphabet_arg, default=ALPHABET, help=f"Substitution alphabet (default: {ALPHABET})")
    p.add_argument(
        "--format",
        choices=["auto", "words", "dict"],
        default="auto",
        help="Input kind; auto treats files with neighbor columns as dictionaries (default: auto)",
    )
    p.add_argument("words", help="Word list or generated dictionary (path or URL)")
    p.add_argument("start_word")
    p.add_argument("end_word")
    return parser


def _load_graph(source, alphabet, fmt):
    fallback = False
    if fmt == "auto":
        if not is_url(source) and looks_like_dictionary(source):
            fmt = "dict"
        else:
            fmt = "words"
            fallback = not is_url(source)
    if fmt == "dict":
        return read_dictionary(source)
    try:
        wordset = open_words(source, alphabet=alphabet)
    except InvalidEncoding:
        if not fallback:
            raise
        # dictionary without neighbor columns, written with another alphabet
        vlog(f"{source} is not a word list for this alphabet, reading it as a dictionary")
        return read_dictionary(source)
    log_with_time(f"✅ {len(wordset)} words were loaded")
    return build_graph(wordset, alphabet)


def cmd_extract_words(args):
    count = extract_words(args.words, args.extracted_words, args.length)
    log_with_time(f"✅ {count} words of length {args.length} written to {args.extracted_words}")
    return 0


def cmd_generate_dict(args):
    wordset = open_words(args.words, alphabet=args.alphabet)
    log_with_time(f"✅ {len(wordset)} words were loaded")
    graph = build_graph(wordset, args.alphabet)
    words, edges, isolated = graph_stats(graph)
    vlog(f"{words} words, {edges} links, {isolated} without neighbors")
    write_dictionary(graph, args.dictionary)
    log_with_time(f"✅ Dictionary written to {args.dictionary}")
    return 0


def cmd_find_path(args):
    graph = _load_graph(args.words, args.alphabet, args.format)
    t0 = time.time()
    try:
        path = find_path(graph, args.start_word, args.end_word)
    except WordNotFound as e:
        for word in e.words:
            print(Fore.YELLOW + f"'{word}' is not in the dictionary" + Fore.RESET)
        return 0
    vlog("Search finished", t0)
    if utils.VERBOSE:
        reachable = len(distances(graph, args.start_word)) - 1
        vlog(f"{reachable} words reachable from '{args.start_word}'")

    if path is None:
        print(Fore.YELLOW + "no path found" + Fore.RESET)
        return 0
    print(Fore.GREEN + f"found path ({hops(path)} hops):" + Fore.RESET)
    for word in path:
        print(f"  - {word}")
    return 0


COMMANDS = {
    "extract-words": cmd_extract_words,
    "generate-dict": cmd_generate_dict,
    "find-path": cmd_find_path,
}


def run_solver(argv=None):
    """Parse ``argv`` and run the selected command. Returns the exit status."""
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose

    try:
        return COMMANDS[args.command](args)
    except (WordLadderError, OSError, UnicodeDecodeError, requests.RequestException) as e:
        log_with_time(f"Error: {e}", color=Fore.RED)
        return 1
