"""Word validation and scoring for Word Scramble."""

from .validate import (
    validate,
    is_original,
    is_possible,
    is_real,
    is_distinct,
    is_long_enough,
    MIN_WORD_LENGTH,
)
from .models import Accepted, Rejected, RejectionCode, ValidationResult
from .letters import normalize_word, char_count, is_spellable
from .lexicon import Lexicon, WordListLexicon, WordfreqLexicon, load_lexicon, DEFAULT_LANGUAGE
from .scoring import BASE_AWARD, LENGTH_BONUS, length_bonus, score_word
from .messages import REJECTION_MESSAGES, format_rejection

__all__ = [
    # Main validation
    "validate",
    "is_original",
    "is_possible",
    "is_real",
    "is_distinct",
    "is_long_enough",
    "MIN_WORD_LENGTH",
    # Models
    "Accepted",
    "Rejected",
    "RejectionCode",
    "ValidationResult",
    # Letters
    "normalize_word",
    "char_count",
    "is_spellable",
    # Dictionary
    "Lexicon",
    "WordListLexicon",
    "WordfreqLexicon",
    "load_lexicon",
    "DEFAULT_LANGUAGE",
    # Scoring
    "BASE_AWARD",
    "LENGTH_BONUS",
    "length_bonus",
    "score_word",
    # Messages
    "REJECTION_MESSAGES",
    "format_rejection",
]
