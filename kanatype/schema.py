from typing import List, Tuple
from pydantic import BaseModel, Field, ConfigDict

class Chunk(BaseModel):
    """One typing unit: the text shown on screen and the spellings that complete it."""
    displayed: str = Field(..., min_length=1)
    accepted: Tuple[str, ...] = Field(..., min_length=1)  # most-preferred spelling first
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def primary(self) -> str:
        return self.accepted[0]

    def matches(self, typed: str) -> bool:
        """True when *typed* is a complete match for any accepted spelling."""
        return typed in self.accepted

class TypingTarget(BaseModel):
    """Ordered chunks for one input string.

    ``fixed`` and ``disabled`` belong to the game layer; chunkers leave them
    at their defaults and callers derive flagged copies with ``model_copy``.
    """
    chunks: Tuple[Chunk, ...] = ()
    fixed: bool = False      # do not replace this target after it is typed
    disabled: bool = False   # completing it triggers no action or sound
    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def displayed_chunks(self) -> List[str]:
        return [chunk.displayed for chunk in self.chunks]

    @property
    def typed_chunks(self) -> List[str]:
        return [chunk.primary for chunk in self.chunks]

    @property
    def displayed_text(self) -> str:
        return "".join(self.displayed_chunks)
