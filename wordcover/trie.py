"""
trie.py

Letter-set trie over word masks.

A word is stored as the path of its set bits taken in increasing bit order,
so every letter set has exactly one path and permutations never show up.
All stored masks have the same number of bits, which makes the word end
implicit: a path of that depth is a word.
"""

from wordcover.encoding import ALPHABET_SIZE, iter_bits


class LetterTrie:
    """
    26-way trie node.
    - children: fixed list indexed by bit, None where absent
    - mask: bit i set => children[i] exists
    """
    __slots__ = ("mask", "children")

    def __init__(self, size: int = ALPHABET_SIZE):
        self.mask = 0
        self.children = [None] * size

    def child(self, index: int) -> "LetterTrie":
        node = self.children[index]
        if node is None:
            node = self.children[index] = LetterTrie(len(self.children))
            self.mask |= 1 << index
        return node

    def insert(self, word: int) -> None:
        node = self
        for index in iter_bits(int(word)):
            node = node.child(index)

    @classmethod
    def from_masks(cls, masks, size: int = ALPHABET_SIZE) -> "LetterTrie":
        trie = cls(size)
        for mask in masks:
            trie.insert(mask)
        return trie

    def contains(self, word: int, depth: int) -> bool:
        """True if `word` is a stored path of exactly `depth` letters."""
        word = int(word)
        if word.bit_count() != depth:
            return False
        node = self
        for index in iter_bits(word):
            if not node.mask >> index & 1:
                return False
            node = node.children[index]
        return True

    def masks(self, depth: int):
        """Yield every stored mask of `depth` letters, smallest path first."""
        stack = [(self, 0, 0)]
        while stack:
            node, level, acc = stack.pop()
            if level == depth:
                yield acc
                continue
            for index in reversed(list(iter_bits(node.mask))):
                stack.append((node.children[index], level + 1, acc | 1 << index))

    def __len__(self):
        count = 0
        for index in iter_bits(self.mask):
            child = self.children[index]
            count += len(child) if child.mask else 1
        return count
