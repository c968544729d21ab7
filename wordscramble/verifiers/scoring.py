from typing import Dict

from .letters import char_count


# Every accepted word is worth this much
BASE_AWARD = 5

# Extra points by word length; anything outside the table gets nothing
LENGTH_BONUS: Dict[int, int] = {
    3: 3,
    4: 4,
    5: 5,
    6: 6,
    7: 7,
}


def length_bonus(raw: str) -> int:
    """Bonus for the length of the submitted text as typed (case-folded, untrimmed)."""
    return LENGTH_BONUS.get(char_count(raw.lower()), 0)


def score_word(raw: str) -> int:
    """Points awarded for an accepted submission."""
    return BASE_AWARD + length_bonus(raw)
