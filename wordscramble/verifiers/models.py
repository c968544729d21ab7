"""Data models for word validation."""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field


RejectionCode = Literal[
    "EMPTY",
    "ALREADY_USED",
    "NOT_SPELLABLE",
    "NOT_A_WORD",
    "SAME_AS_ROOT",
    "TOO_SHORT",
]


class Accepted(BaseModel):
    """A submission that passed every check."""
    kind: Literal["accepted"] = "accepted"
    word: str = Field(..., min_length=1)
    score_delta: int = Field(..., ge=0)


class Rejected(BaseModel):
    """A submission that failed one check."""
    kind: Literal["rejected"] = "rejected"
    code: RejectionCode
    word: str = ""
    root_word: str = ""

    @property
    def is_silent(self) -> bool:
        """Empty input is dropped without telling the player."""
        return self.code == "EMPTY"


ValidationResult = Annotated[Union[Accepted, Rejected], Field(discriminator="kind")]
