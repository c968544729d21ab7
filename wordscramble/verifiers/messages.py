"""User-facing texts for rejected submissions."""

from typing import Dict, Tuple

from .models import Rejected, RejectionCode


# code -> (title, message template); {root} is replaced with the root word
REJECTION_MESSAGES: Dict[RejectionCode, Tuple[str, str]] = {
    "ALREADY_USED": ("Word used already", "Be more original!"),
    "NOT_SPELLABLE": ("Word not Possible", "You can't spell that word from '{root}'"),
    "NOT_A_WORD": ("Word not recognized", "You can't just make them up, you know!"),
    "SAME_AS_ROOT": ("Repeated word", "This word is the same as the initial word!"),
    "TOO_SHORT": ("Word is too small", "You need to write a word with at least 3 characters!"),
}


def format_rejection(rejected: Rejected) -> Tuple[str, str]:
    """
    Build the (title, message) pair shown to the player.

    Raises:
        ValueError: For silent rejections, which have nothing to show
    """
    if rejected.code not in REJECTION_MESSAGES:
        raise ValueError(f"No message for rejection code '{rejected.code}'")

    title, template = REJECTION_MESSAGES[rejected.code]
    return title, template.format(root=rejected.root_word)
