import pytest

from wordcover.words import load_word_list, load_words


def test_load_word_list_strips_and_skips_blanks(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("fjord\n\n  waltz \nvibex\n")
    assert load_word_list(path) == ["fjord", "waltz", "vibex"]


def test_undecodable_lines_are_skipped(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"fjord\ncaf\xc3\xa9s\n\xff\xfe\nwaltz\n")
    assert load_word_list(path) == ["fjord", "waltz"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "nope.txt")


def test_load_words_concatenates_in_order(tmp_path):
    allowed = tmp_path / "allowed.txt"
    answers = tmp_path / "answers.txt"
    allowed.write_text("fjord\nwaltz\n")
    answers.write_text("vibex\nfjord\n")
    assert load_words(allowed, answers) == ["fjord", "waltz", "vibex", "fjord"]


def test_load_words_fails_if_either_list_is_missing(tmp_path):
    allowed = tmp_path / "allowed.txt"
    allowed.write_text("fjord\n")
    with pytest.raises(FileNotFoundError):
        load_words(allowed, tmp_path / "answers.txt")
