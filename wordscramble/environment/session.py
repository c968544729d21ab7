import random
from typing import Dict, List, Optional, Sequence, Any
from pydantic import BaseModel, Field

from ..verifiers.letters import normalize_word


class Session(BaseModel):
    """
    State of one Word Scramble game.

    The root word is fixed for the life of the session; a restart builds a
    new Session instead of editing this one. Only `record_acceptance`
    changes the history and score, and it trusts the caller to have
    validated the word first.

    Attributes:
        root_word: Word whose letters every submission must come from
        used_words: Accepted words, most recent first
        score: Points earned so far
    """

    root_word: str = Field(..., min_length=1)
    used_words: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)

    def record_acceptance(self, word: str, score_delta: int) -> None:
        """Prepend an accepted word to the history and add its points."""
        self.used_words.insert(0, word)
        self.score += score_delta

    @property
    def words_found(self) -> int:
        return len(self.used_words)

    def snapshot(self) -> Dict[str, Any]:
        """Current state as a plain dictionary, for display."""
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "score": self.score,
        }


def restart(word_list: Sequence[str], rng: Optional[random.Random] = None) -> Session:
    """
    Start a fresh session with a randomly chosen root word.

    Args:
        word_list: Candidate root words
        rng: Optional random generator for reproducible games

    Returns:
        A new Session with empty history and zero score

    Raises:
        ValueError: If the list has no usable word
    """
    candidates = [w for w in (normalize_word(w) for w in word_list) if w]
    if not candidates:
        raise ValueError("Cannot start a game: the word list has no usable root word")

    rng = rng or random.Random()
    return Session(root_word=rng.choice(candidates))
