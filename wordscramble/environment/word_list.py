from pathlib import Path
from typing import List, Optional

from ..verifiers.data import DEFAULT_START_WORDS_PATH
from ..verifiers.letters import normalize_word


def load_word_list(path: Optional[str | Path] = None) -> List[str]:
    """
    Load the candidate root words.

    The file holds one word per line. Lines are stripped and lowercased and
    blank lines are dropped, so a root word can never be empty.

    Args:
        path: Word list to read (defaults to the bundled start.txt)

    Returns:
        The usable words, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file has no usable words
    """
    path = Path(path) if path is not None else DEFAULT_START_WORDS_PATH

    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with open(path, encoding="utf-8") as f:
        words = [w for w in (normalize_word(line) for line in f) if w]

    if not words:
        raise ValueError(f"Word list is empty: {path}")

    return words
