"""Game session and orchestration for Word Scramble."""

from .models import GameConfig
from .session import Session, restart
from .word_list import load_word_list
from .display import format_session, format_used_words, format_alert
from .scramble import WordScramble

__all__ = [
    "GameConfig",
    "Session",
    "restart",
    "load_word_list",
    "format_session",
    "format_used_words",
    "format_alert",
    "WordScramble",
]
