"""
Find the Spelling Bee letter sets with the most words, highest score, fewest words and lowest score.
Run: python -m bee_max.solve [--dictionary PATH] [--workers N]
Or check one puzzle: python -m bee_max.solve --letters ABCDEFG --required A
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

from .index import load_index
from .letters import InvalidConfiguration, LetterSetPlusRequired
from .pangrams import pangram_letter_sets
from .report import format_words, summary_lines, word_count
from .search import evaluate, search


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Search all pangram letter sets for the best and worst Spelling Bee puzzles.")
    p.add_argument("--dictionary", help="Word list, one word per line (default: $WORD_LIST or /usr/share/dict/words)")
    p.add_argument("--workers", type=int, help="Worker processes; 0 = one per CPU (default: $BEE_MAX_WORKERS or 1)")
    p.add_argument("--letters", help="Score just this puzzle: 7 distinct letters (needs --required)")
    p.add_argument("--required", help="The required letter for --letters")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Log progress (-vv: every new extreme)")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(asctime)s %(levelname)s %(message)s",
    )

    puzzle = None
    if args.letters or args.required:
        if not (args.letters and args.required):
            p.error("--letters and --required go together")
        try:
            puzzle = LetterSetPlusRequired.parse(args.letters, args.required)
        except InvalidConfiguration as e:
            p.error(str(e))

    start = time.perf_counter()
    try:
        index = load_index(args.dictionary)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        return 1
    print(f"word list size {len(index)}")

    if puzzle is not None:
        words = evaluate(index, puzzle)
        print(f"{puzzle} has {word_count(words.cardinality())} scoring {words.score()} in total")
        print(f"Words for that set: {format_words(words)}")
    else:
        letter_sets = pangram_letter_sets(index.word_list)
        print(f"{len(letter_sets)} sets of letters allow at least one pangram")
        result = search(index, letter_sets, workers=args.workers)
        for line in summary_lines(result):
            print(line)

    print(f"Elapsed time {time.perf_counter() - start:.1f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
