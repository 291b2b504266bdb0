from wordcover.encoding import dedup_masks, encode
from wordcover.trie import LetterTrie


WORDS = ["fjord", "gucks", "nymph", "vibex", "waltz", "dwarf", "stone", "notes"]


def _masks():
    return dedup_masks([encode(w) for w in WORDS])


def test_insert_sets_child_mask():
    trie = LetterTrie()
    trie.insert(0b10110)
    assert trie.mask == 0b10
    node = trie.children[1]
    assert node.mask == 0b100
    assert node.children[2].mask == 0b10000
    assert node.children[2].children[4].mask == 0


def test_every_inserted_mask_is_contained():
    masks = _masks()
    trie = LetterTrie.from_masks(masks)
    for mask in masks:
        assert trie.contains(mask, 5)


def test_no_other_paths_are_contained():
    masks = _masks()
    trie = LetterTrie.from_masks(masks)
    assert not trie.contains(encode("chair"), 5)
    # Same letters as stored words, wrong combination
    assert not trie.contains(encode("fjorg"), 5)
    assert not trie.contains(encode("fjor"), 5)
    assert sorted(trie.masks(5)) == sorted(int(m) for m in masks)


def test_len_counts_distinct_words():
    trie = LetterTrie.from_masks(_masks())
    assert len(trie) == 7  # stone/notes share a letter set
    assert len(LetterTrie()) == 0


def test_reinserting_is_a_no_op():
    trie = LetterTrie.from_masks(_masks())
    before = sorted(trie.masks(5))
    trie.insert(encode("fjord"))
    assert sorted(trie.masks(5)) == before
