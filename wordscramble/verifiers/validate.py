"""
Word validation for Word Scramble submissions.

Checks, in this order (the first failure wins):
1. Originality (not submitted earlier in the session)
2. Spellability (built only from the root word's letters)
3. Dictionary (a real word in the configured language)
4. Distinctness (not the root word itself)
5. Length (at least MIN_WORD_LENGTH characters)
"""

from typing import List, Sequence

from .letters import normalize_word, char_count, is_spellable
from .lexicon import Lexicon, DEFAULT_LANGUAGE
from .models import Accepted, Rejected, ValidationResult
from .scoring import score_word


MIN_WORD_LENGTH = 3


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    return is_spellable(word, root_word)


def is_real(word: str, lexicon: Lexicon, language: str = DEFAULT_LANGUAGE) -> bool:
    return lexicon.is_known_word(word, language)


def is_distinct(word: str, root_word: str) -> bool:
    return word != root_word


def is_long_enough(word: str) -> bool:
    return char_count(word) >= MIN_WORD_LENGTH


def validate(
    raw_input: str,
    root_word: str,
    used_words: List[str],
    lexicon: Lexicon,
    language: str = DEFAULT_LANGUAGE,
) -> ValidationResult:
    """
    Decide whether a raw submission is accepted against the current game.

    Nothing is mutated: the caller records the word on acceptance.

    Returns:
        Accepted with the normalized word and its points, or Rejected with
        the code of the first failed check and a snapshot of the root word
    """
    word = normalize_word(raw_input)

    def reject(code) -> Rejected:
        return Rejected(code=code, word=word, root_word=root_word)

    if not word:
        return reject("EMPTY")

    if not is_original(word, used_words):
        return reject("ALREADY_USED")

    if not is_possible(word, root_word):
        return reject("NOT_SPELLABLE")

    if not is_real(word, lexicon, language):
        return reject("NOT_A_WORD")

    if not is_distinct(word, root_word):
        return reject("SAME_AS_ROOT")

    if not is_long_enough(word):
        return reject("TOO_SHORT")

    return Accepted(word=word, score_delta=score_word(raw_input))
