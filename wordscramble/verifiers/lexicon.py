"""
Dictionary lookup for submitted words.

The validator only needs to know whether a word exists in a language, so
the lookup sits behind the small `Lexicon` protocol. `WordfreqLexicon` is
the default English dictionary; `WordListLexicon` backs the protocol with a
plain text word list for custom or test dictionaries.
"""

from pathlib import Path
from typing import Iterable, Optional, Protocol, Set

from wordfreq import zipf_frequency


DEFAULT_LANGUAGE = "en"

# Words rarer than this (on the Zipf scale) are treated as unknown
DEFAULT_MIN_ZIPF = 1.5


class Lexicon(Protocol):
    """Anything that can tell whether a word is real."""

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        ...


class WordfreqLexicon:
    """
    Lexicon backed by wordfreq's word frequency lists.

    A word is known when it is a single alphabetic token whose Zipf
    frequency in the configured language reaches `min_zipf`.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.language = language
        self.min_zipf = min_zipf

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language or not word.isalpha():
            return False
        return zipf_frequency(word, language) >= self.min_zipf


class WordListLexicon:
    """
    In-memory lexicon for a single language.

    Words are stored lowercase. Lookups for any language other than the
    one the list was loaded for are always False.
    """

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def load_from_txt(
        cls,
        path: str | Path,
        language: str = DEFAULT_LANGUAGE,
    ) -> "WordListLexicon":
        """
        Load a lexicon from a UTF-8 text file with one word per line.

        Raises:
            FileNotFoundError: If the file does not exist
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Lexicon file not found: {path}")

        with open(path, encoding="utf-8") as f:
            return cls(f, language=language)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def is_known_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return word in self


def load_lexicon(path: Optional[str | Path] = None, language: str = DEFAULT_LANGUAGE) -> Lexicon:
    """Word list from `path` if given, otherwise wordfreq's list for `language`."""
    if path is not None:
        return WordListLexicon.load_from_txt(path, language=language)
    return WordfreqLexicon(language=language)
