"""
words.py

Handles loading the word lists.
No numpy here, just clean text handling.
"""

from pathlib import Path


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ALLOWED_PATH = DATA_DIR / "wordle-nyt-allowed-guesses.txt"
ANSWERS_PATH = DATA_DIR / "wordle-nyt-answers-alphabetical.txt"


def load_word_list(path):
    """
    Load a newline-separated word list into a Python list.

    Lines that are not valid ASCII are skipped rather than failing the whole
    file. A missing file raises FileNotFoundError.
    """
    words = []
    with open(path, "rb") as f:
        for raw in f:
            try:
                line = raw.decode("ascii").strip()
            except UnicodeDecodeError:
                continue
            if line:
                words.append(line)
    return words


def load_words(allowed_path=ALLOWED_PATH, answers_path=ANSWERS_PATH):
    """
    Returns the allowed guesses followed by the answers, as one list.

    The two lists are concatenated before encoding; repeats across them are
    harmless because the lexicon ignores duplicate surface words.
    """
    return load_word_list(allowed_path) + load_word_list(answers_path)
