"""Letter utilities: normalization, character counting and spellability."""

import unicodedata
from collections import Counter


def normalize_word(raw: str) -> str:
    """Lowercase a submission and strip surrounding whitespace and newlines."""
    return unicodedata.normalize("NFC", raw).lower().strip()


def char_count(text: str) -> int:
    """
    Count characters the same way everywhere in the game.

    A character is a Unicode code point after NFC composition, so "é"
    typed as "e" + combining accent counts once.
    """
    return len(unicodedata.normalize("NFC", text))


def is_spellable(word: str, root: str) -> bool:
    """
    Check whether `word` can be built from the letters of `root`.

    Each letter of the root can be used at most as many times as it
    appears there. Letters are consumed in the order they appear in
    `word` and the check stops at the first letter that is used up.
    """
    available = Counter(unicodedata.normalize("NFC", root))
    for letter in unicodedata.normalize("NFC", word):
        if available[letter] == 0:
            return False
        available[letter] -= 1
    return True
