"""
search.py

Depth-first search for letter-disjoint word combinations.

The search keeps a used-letters mask and a stack of chosen word masks. Each
new word is read off the trie one letter at a time, always taking unused
letters above the previous one. Across words, the lowest letter never goes
down, which is what keeps each combination from being reported in more than
one order.

Two prunes keep the search tractable:

1. Vowel coverage
   Every word needs at least one vowel. If fewer vowels are left unused than
   words still to place, the branch cannot complete.

2. Letter budget
   Words are placed in order of their lowest letter, so any unused letter
   below the lowest letter of the word being placed can never be filled
   later. Once more of them than the slack (letters the full combination may
   leave out) are skipped, every later candidate at this level skips at
   least as many, so the whole level is abandoned.
"""

from dataclasses import dataclass

from wordcover.encoding import ALPHABET_SIZE, VOWELS, WORD_LENGTH, iter_bits, lowest_bit
from wordcover.trie import LetterTrie


COMBO_LENGTH = 5


@dataclass(frozen=True)
class SearchRules:
    alphabet_size: int = ALPHABET_SIZE
    word_length: int = WORD_LENGTH
    combo_length: int = COMBO_LENGTH
    vowels: int | None = VOWELS

    def __post_init__(self):
        if self.word_length < 1 or self.combo_length < 1:
            raise ValueError("word_length and combo_length must be positive")
        if self.slack < 0:
            raise ValueError(
                f"{self.combo_length} words of {self.word_length} letters "
                f"do not fit in a {self.alphabet_size}-letter alphabet"
            )

    @property
    def slack(self) -> int:
        """Letters a complete combination leaves unused."""
        return self.alphabet_size - self.combo_length * self.word_length

    @property
    def seed_mask(self) -> int:
        """
        Letters of which every complete combination uses at least one.

        The word with the lowest first letter can only have skipped `slack`
        letters below it, so its lowest bit is at most `slack`.
        """
        return (1 << (self.slack + 1)) - 1


@dataclass
class SearchStats:
    words_tried: int = 0
    vowel_prunes: int = 0
    budget_cutoffs: int = 0
    combinations: int = 0

    def merge(self, other: "SearchStats") -> None:
        self.words_tried += other.words_tried
        self.vowel_prunes += other.vowel_prunes
        self.budget_cutoffs += other.budget_cutoffs
        self.combinations += other.combinations


class CoverSearch:
    """
    Finds every combination of `combo_length` disjoint trie words.

    `emit` receives each completed combination as a tuple of masks. One
    instance is used by one task at a time; the trie is only read.
    """

    def __init__(self, trie: LetterTrie, emit, rules: SearchRules = SearchRules()):
        self.trie = trie
        self.emit = emit
        self.rules = rules
        self.stats = SearchStats()

    def run(self, start: int) -> None:
        """Search every combination whose first word is `start`."""
        start = int(start)
        self.search(start, [start])

    def search(self, used: int, words: list[int]) -> None:
        rules = self.rules
        remaining = rules.combo_length - len(words)
        if remaining <= 0:
            self.stats.combinations += 1
            self.emit(tuple(words))
            return

        if rules.vowels is not None and (rules.vowels & ~used).bit_count() < remaining:
            self.stats.vowel_prunes += 1
            return

        self.find_word(used, words)

    def find_word(self, used: int, words: list[int]) -> None:
        root = self.trie
        available = root.mask & ~used
        if words:
            # Next word starts at or above the previous word's lowest letter
            available &= ~((1 << lowest_bit(words[-1])) - 1)

        slack = self.rules.slack
        for i in iter_bits(available):
            if (((1 << i) - 1) & ~used).bit_count() > slack:
                self.stats.budget_cutoffs += 1
                return
            self._extend(root.children[i], 1 << i, i, 1, used, words)

    def _extend(self, node: LetterTrie, word: int, last: int, depth: int, used: int, words: list[int]) -> None:
        if depth == self.rules.word_length:
            self.stats.words_tried += 1
            words.append(word)
            try:
                self.search(used | word, words)
            finally:
                words.pop()
            return

        available = node.mask & ~used & ~((2 << last) - 1)
        for j in iter_bits(available):
            self._extend(node.children[j], word | 1 << j, j, depth + 1, used, words)


def find_combinations(trie: LetterTrie, starts, rules: SearchRules = SearchRules()):
    """Run the search from each start in turn; returns (combinations, stats)."""
    found = []
    searcher = CoverSearch(trie, found.append, rules)
    for start in starts:
        searcher.run(start)
    return found, searcher.stats
