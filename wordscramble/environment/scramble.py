import random
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .models import GameConfig
from .session import Session, restart
from .word_list import load_word_list
from ..verifiers.lexicon import Lexicon, load_lexicon
from ..verifiers.messages import format_rejection
from ..verifiers.models import Accepted, ValidationResult
from ..verifiers.validate import validate


class WordScramble(BaseModel):
    """
    Top-level orchestrator for a Word Scramble game.

    Owns the live Session and the collaborators it is checked against,
    runs submissions through the validator and applies accepted words.
    A UI plugs in through the two callbacks.

    Attributes:
        config: Game configuration
        lexicon: Dictionary used to recognise words
        word_list: Candidate root words
        session: The current game
        on_rejection: Called with (title, message) when a word is refused
        on_update: Called with the session after it changes
        verbose: If True, print progress to stdout
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    lexicon: Any = None
    word_list: List[str] = Field(default_factory=list)
    session: Optional[Session] = None
    on_rejection: Optional[Callable[[str, str], None]] = None
    on_update: Optional[Callable[[Session], None]] = None
    verbose: bool = False
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        lexicon: Optional[Lexicon] = None,
        word_list: Optional[List[str]] = None,
        **kwargs: Any
    ) -> "WordScramble":
        """
        Factory method to build a game and start its first session.

        Collaborators that are not passed in are loaded from the config.

        Args:
            config: Optional GameConfig (bundled root words and wordfreq by default)
            lexicon: Optional dictionary backend
            word_list: Optional candidate root words
            **kwargs: Callbacks and the verbose flag

        Returns:
            A WordScramble with a live session

        Raises:
            FileNotFoundError: If a configured word list is missing
            ValueError: If the root word list is empty
        """
        config = config or GameConfig()

        if lexicon is None:
            lexicon = load_lexicon(config.lexicon_path, config.language)
        if word_list is None:
            word_list = load_word_list(config.word_list_path)

        game = cls(config=config, lexicon=lexicon, word_list=list(word_list), **kwargs)
        game.restart()
        return game

    def restart(self) -> Session:
        """Throw away the current game and start over with a new root word."""
        self.session = restart(self.word_list, rng=self._rng)

        if self.verbose:
            print(f"New game: root word is '{self.session.root_word}'")

        self._notify_update()
        return self.session

    def submit(self, raw: str) -> ValidationResult:
        """
        Validate a submission and apply it to the session if accepted.

        Rejections leave the session untouched. Empty input is returned as
        a rejection but not reported to the UI.
        """
        if self.session is None:
            self.restart()

        result = validate(
            raw,
            self.session.root_word,
            self.session.used_words,
            self.lexicon,
            self.config.language,
        )

        if isinstance(result, Accepted):
            self.session.record_acceptance(result.word, result.score_delta)
            if self.verbose:
                print(f"✓ '{result.word}' +{result.score_delta} (score {self.session.score})")
            self._notify_update()
            return result

        if result.is_silent:
            return result

        if self.verbose:
            print(f"✗ '{result.word}' rejected: {result.code}")

        if self.on_rejection:
            title, message = format_rejection(result)
            self.on_rejection(title, message)

        return result

    def _notify_update(self) -> None:
        if self.on_update:
            self.on_update(self.session)
