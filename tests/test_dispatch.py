from wordcover.dispatch import collect, make_tasks, run_search, starting_words
from wordcover.encoding import dedup_masks, encode
from wordcover.search import SearchRules
from wordcover.trie import LetterTrie


WORDS = [
    "fjord", "gucks", "nymph", "vibex", "waltz",
    "jumbo", "pricy", "glyph", "dwarf", "quick", "stone",
]


def _setup():
    masks = dedup_masks([encode(w) for w in WORDS])
    return masks, LetterTrie.from_masks(masks)


def test_starting_words_use_a_seed_letter():
    masks, _ = _setup()
    starts = starting_words(masks)
    assert sorted(int(s) for s in starts) == sorted(
        encode(w) for w in ["fjord", "jumbo", "quick"]
    )


def test_starting_words_follow_the_slack():
    masks = [0b00011, 0b00110, 0b01100, 0b11000]
    rules = SearchRules(alphabet_size=8, word_length=2, combo_length=4, vowels=None)
    assert list(starting_words(masks, rules)) == [0b00011]
    rules = SearchRules(alphabet_size=9, word_length=2, combo_length=4, vowels=None)
    assert list(starting_words(masks, rules)) == [0b00011, 0b00110]


def test_make_tasks_chunks():
    assert make_tasks([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert make_tasks([1, 2], 0) == [[1], [2]]
    assert make_tasks([], 3) == []


def test_in_process_run():
    masks, trie = _setup()
    starts = starting_words(masks)
    results = list(run_search(trie, starts, workers=1))

    assert sum(r["completed"] for r in results) == len(starts)
    combinations, stats = collect(results)
    assert combinations == [
        tuple(encode(w) for w in ["fjord", "waltz", "vibex", "gucks", "nymph"])
    ]
    assert stats.combinations == 1


def test_pool_matches_in_process():
    masks, trie = _setup()
    starts = starting_words(masks)

    serial, serial_stats = collect(run_search(trie, starts, workers=1))
    pooled, pooled_stats = collect(run_search(trie, starts, workers=2, chunk_size=2))

    assert sorted(pooled) == sorted(serial)
    assert pooled_stats == serial_stats
