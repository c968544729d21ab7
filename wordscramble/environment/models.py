"""
Pydantic models for the environment layer.

The Session model lives in session.py next to the functions that create and
mutate it; this module holds the game configuration.
"""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ..verifiers.lexicon import DEFAULT_LANGUAGE


class GameConfig(BaseModel):
    """Configuration for a game."""
    model_config = ConfigDict(extra='forbid')

    word_list_path: Optional[Path] = None  # bundled start.txt when unset
    lexicon_path: Optional[Path] = None  # wordfreq dictionary when unset
    language: str = Field(default=DEFAULT_LANGUAGE, min_length=1)
    seed: Optional[int] = None
