from typing import List

from ..verifiers.letters import char_count
from .session import Session


def format_used_words(used_words: List[str]) -> List[str]:
    """One line per accepted word with its character count, most recent first."""
    return [f"({char_count(word)}) {word}" for word in used_words]


def format_alert(title: str, message: str) -> str:
    return f"[{title}] {message}"


def format_session(session: Session) -> str:
    """Render the game screen: root word, score and accepted words."""
    state = session.snapshot()
    lines = []

    lines.append(f"## {state['root_word']}")
    lines.append("")
    lines.append(f"Score: {state['score']}")

    used = format_used_words(state["used_words"])
    if used:
        lines.append("")
        lines.append(f"Words ({len(used)}):")
        for line in used:
            lines.append(f"  {line}")

    return "\n".join(lines)
