"""
encoding.py

Letter masks for five-letter words.

Each letter maps to one bit of a 26-bit integer. The assignment is a fixed
permutation rather than alphabetical order: the rarest letters get the lowest
bits, so the search (which always works upward from the lowest unused letter)
hits the hard-to-place letters first and prunes early.

    bit  0..7   Q J Z X V K W Y
    bit  8..15  F B G H M P D U
    bit 16..25  C L S N T O I R A E
"""

import numpy as np


ALPHABET_SIZE = 26
WORD_LENGTH = 5

ENCODING = (
    1 << 24,  # a
    1 << 9,   # b
    1 << 16,  # c
    1 << 14,  # d
    1 << 25,  # e
    1 << 8,   # f
    1 << 10,  # g
    1 << 11,  # h
    1 << 22,  # i
    1 << 1,   # j
    1 << 5,   # k
    1 << 17,  # l
    1 << 12,  # m
    1 << 19,  # n
    1 << 21,  # o
    1 << 13,  # p
    1 << 0,   # q
    1 << 23,  # r
    1 << 18,  # s
    1 << 20,  # t
    1 << 15,  # u
    1 << 4,   # v
    1 << 6,   # w
    1 << 3,   # x
    1 << 7,   # y
    1 << 2,   # z
)

# Bit index -> letter, the inverse of ENCODING.
DECODING = tuple(
    chr(ord("a") + ENCODING.index(1 << bit)) for bit in range(ALPHABET_SIZE)
)


def encode(word: str) -> int:
    """
    Encode a word as a letter-presence mask.

    Raises ValueError for anything outside a-z. Repeated letters simply
    collapse into one bit, so the popcount of the result is the number of
    distinct letters.
    """
    mask = 0
    for ch in word:
        o = ord(ch) - 97
        if not 0 <= o < ALPHABET_SIZE:
            raise ValueError(f"Unsupported char: {ch!r} (use a-z)")
        mask |= ENCODING[o]
    return mask


def letters_of(mask: int) -> str:
    """Letters of a mask in bit order (rarest first)."""
    return "".join(DECODING[bit] for bit in iter_bits(mask))


VOWELS = encode("aeiouy")


def popcount(mask: int) -> int:
    return mask.bit_count()


def lowest_bit(mask: int) -> int:
    """Index of the lowest set bit, -1 for an empty mask."""
    return (mask & -mask).bit_length() - 1


def iter_bits(mask: int):
    """Yield the set bit indices of mask in increasing order."""
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low


def is_candidate(word: str, length: int = WORD_LENGTH) -> bool:
    """True for lowercase a-z words of `length` distinct letters."""
    if len(word) != length or not word.isascii() or not word.islower():
        return False
    try:
        return popcount(encode(word)) == length
    except ValueError:
        return False


def encode_words(words, length: int = WORD_LENGTH) -> list[tuple[str, int]]:
    """Encode every candidate word, dropping the rest, keeping input order."""
    return [(word, encode(word)) for word in words if is_candidate(word, length)]


def dedup_masks(masks) -> np.ndarray:
    """
    Sorted distinct masks.

    Anagrams (and any words sharing a letter set) collapse to one entry here;
    the lexicon keeps track of the surface words behind each mask.
    """
    return np.unique(np.asarray(masks, dtype=np.uint32))
