"""
five_words.py

Finds every set of five five-letter words with no letter in common.

Five disjoint words use 25 letters, so each combination covers all of the
alphabet but one letter. Words with a repeated letter can never take part
and are dropped up front; anagrams share a letter set and are searched once,
then printed together as "word1/word2".

Output: one combination per line on stdout, in no particular order.
Status, timing and progress go to stderr.

Optional:
-allowed PATH / -answers PATH: the two word lists (concatenated).
-workers N: worker processes (default: CPU count, 1 runs in-process).
-chunk-size N: starting words per worker task.
-progress bar|off: progress bar on stderr.
-words N: combination length (default 5).
-stats: print prune counters after the search.
"""

import argparse
import sys
import time

from tqdm import tqdm

from wordcover.dispatch import run_search, starting_words
from wordcover.encoding import dedup_masks, encode_words
from wordcover.lexicon import build_lexicon, render_combination
from wordcover.search import COMBO_LENGTH, SearchRules, SearchStats
from wordcover.trie import LetterTrie
from wordcover.words import ALLOWED_PATH, ANSWERS_PATH, load_words


def status(message):
    print(message, file=sys.stderr)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Search for five letter-disjoint five-letter words."
    )
    parser.add_argument(
        "-allowed",
        default=str(ALLOWED_PATH),
        help="Word list of allowed guesses (default: data/wordle-nyt-allowed-guesses.txt).",
    )
    parser.add_argument(
        "-answers",
        default=str(ANSWERS_PATH),
        help="Word list of answers (default: data/wordle-nyt-answers-alphabetical.txt).",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=1,
        help="Number of starting words per worker task.",
    )
    parser.add_argument(
        "-progress",
        choices=("bar", "off"),
        default="bar",
        help="Progress output style (default: bar).",
    )
    parser.add_argument(
        "-words",
        type=int,
        default=COMBO_LENGTH,
        help=f"Number of words per combination (default: {COMBO_LENGTH}).",
    )
    parser.add_argument(
        "-stats",
        action="store_true",
        help="Print prune statistics after the search.",
    )
    return parser.parse_args(argv)


def run(args, out=None):
    """Run the whole pipeline; returns the number of combinations written."""
    start_time = time.perf_counter()

    try:
        rules = SearchRules(combo_length=args.words)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    try:
        words = load_words(args.allowed, args.answers)
    except OSError as exc:
        raise SystemExit(f"Could not read word list: {exc}") from exc
    status(f"Read {len(words):,} words.")

    encoded = encode_words(words)
    status(f"Kept {len(encoded):,} words with {rules.word_length} distinct letters.")

    lexicon = build_lexicon(words)
    status(f"Elapsed: {time.perf_counter() - start_time:.2f}s")

    masks = dedup_masks([mask for _, mask in encoded])
    status(f"{len(masks):,} distinct letter sets.")
    status(f"Elapsed: {time.perf_counter() - start_time:.2f}s")

    trie = LetterTrie.from_masks(masks)
    starts = starting_words(masks, rules)
    status(f"{len(starts):,} starting words.")
    status(f"Elapsed: {time.perf_counter() - start_time:.2f}s")

    results = run_search(
        trie,
        starts,
        rules,
        workers=args.workers,
        chunk_size=args.chunk_size,
    )

    stats = SearchStats()
    written = 0
    with tqdm(
        total=len(starts),
        desc="Starting words",
        unit="word",
        disable=args.progress == "off",
        file=sys.stderr,
    ) as bar:
        for result in results:
            for combination in result["combinations"]:
                tqdm.write(render_combination(combination, lexicon), file=out or sys.stdout)
                written += 1
            stats.merge(result["stats"])
            bar.update(result["completed"])

    status(f"Found {written:,} combinations.")
    if args.stats:
        status(
            f"Words tried: {stats.words_tried:,} | "
            f"vowel prunes: {stats.vowel_prunes:,} | "
            f"budget cutoffs: {stats.budget_cutoffs:,}"
        )
    status(f"Elapsed: {time.perf_counter() - start_time:.2f}s")
    return written


def main(argv=None):
    run(parse_args(argv))


if __name__ == "__main__":
    main()
