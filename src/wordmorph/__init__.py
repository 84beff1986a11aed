"""Word Morph word-ladder engine.

Transforms a start word into a target word through single-letter edits, each intermediate
word being in the dictionary.  Finds shortest transformations with a bounded bidirectional
search over the word graph.
"""

import argparse
import sys
from time import time

from .errors import InvalidWord, SearchExceeded
from .lexicon import load_lexicon
from .neighbors import EditMode
from .session import GameSession
from .util import path_str

EXIT_FOUND = 0
EXIT_INVALID = 1
EXIT_NOT_FOUND = 2
EXIT_EXCEEDED = 3


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for `python -m wordmorph`."""
    parser = argparse.ArgumentParser(
        prog="wordmorph", description="Find a shortest word ladder between two words"
    )
    parser.add_argument("start", nargs="?", help="Start word")
    parser.add_argument("target", nargs="?", help="Target word")
    parser.add_argument(
        "--mode",
        type=EditMode.parse,
        default=EditMode.CLASSIC,
        help="Edit mode: classic (substitution only) or flex (also insert/delete)",
    )
    parser.add_argument("--cap", type=int, help="Maximum number of moves (default: 3x length)")
    parser.add_argument("--ceiling", type=int, help="Maximum number of search states")
    parser.add_argument("--word-list", type=str, help="Path to the word list file")
    parser.add_argument(
        "--lengths",
        type=int,
        nargs="+",
        help="Allowed word lengths (default: configured lengths)",
    )
    parser.add_argument(
        "--random", action="store_true", help="Pick a random start/target pair"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the Word Morph command line."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.random and not (args.start and args.target):
        parser.print_usage(sys.stderr)
        print("Provide START and TARGET, or --random.", file=sys.stderr)
        return EXIT_INVALID

    try:
        lexicon = load_lexicon(args.word_list)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID

    session = GameSession(lexicon, out=sys.stdout)
    if args.ceiling is not None:
        session.settings = session.settings.model_copy(update={"expansion_ceiling": args.ceiling})
    session.set_mode(args.mode)
    if args.lengths:
        session.state.allowed_lengths = set(args.lengths)

    try:
        if args.random:
            session.pick_random_pair()
            session.start_game()
        else:
            session.start_game(args.start, args.target)
    except InvalidWord as e:
        print(str(e), file=sys.stderr)
        return EXIT_INVALID
    if args.cap is not None:
        session.state.move_cap = args.cap

    st = session.state
    start_time = time()
    try:
        path = session.find_path(st.start, st.target, st.move_cap)
    except SearchExceeded as e:
        print(f"{e} Narrow the allowed lengths or lower the cap.")
        return EXIT_EXCEEDED
    elapsed = f"{time() - start_time:.2f}s"

    if path is None:
        print(f"No path within {st.move_cap} moves ({elapsed}).")
        return EXIT_NOT_FOUND
    print(path_str(path))
    print(f"Moves: {len(path) - 1} (cap {st.move_cap}, {elapsed})")
    return EXIT_FOUND
