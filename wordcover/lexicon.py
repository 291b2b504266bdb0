"""
lexicon.py

Maps letter masks back to the words that produced them, and renders finished
combinations as text.
"""

from wordcover.encoding import encode_words


class LexiconMissError(LookupError):
    """A combination referenced a mask that no loaded word produced."""


def build_lexicon(words, length: int = 5) -> dict[int, str]:
    """
    Build mask -> "word1/word2/..." for every candidate word.

    Words sharing a letter set are joined with "/" in first-seen order.
    A word listed twice only appears once.
    """
    groups: dict[int, list[str]] = {}
    for word, mask in encode_words(words, length):
        group = groups.setdefault(mask, [])
        if word not in group:
            group.append(word)
    return {mask: "/".join(group) for mask, group in groups.items()}


def render_combination(combination, lexicon: dict[int, str]) -> str:
    """One output line: the words of a combination, space separated."""
    parts = []
    for mask in combination:
        try:
            parts.append(lexicon[int(mask)])
        except KeyError as exc:
            raise LexiconMissError(f"no word for mask {int(mask):#09x}") from exc
    return " ".join(parts)
