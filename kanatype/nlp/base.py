from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple, Union

from kanatype.schema import Chunk, TypingTarget


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class UnrecognizedKanaError(Exception):
    """Raised when a unit of the input cannot be turned into a chunk."""
    def __init__(self, unit: str, text: str, position: int, reason: str):
        super().__init__(
            f"Cannot chunk '{unit}' at position {position} in text '{text}': "
            f"{reason}"
        )
        self.unit = unit
        self.text = text
        self.position = position
        self.reason = reason

class UnrecognizedPolicy(str, Enum):
    skip = "skip"
    raise_ = "raise"

class BaseRomanizationTable(ABC):
    """Abstract base class for kana unit -> accepted spellings lookups"""

    @abstractmethod
    def lookup(self, unit: str) -> Optional[Tuple[str, ...]]:
        """Return the accepted spellings for *unit*, most-preferred first, or None"""
        pass

    def __contains__(self, unit: str) -> bool:
        return self.lookup(unit) is not None

    def primary(self, unit: str) -> Optional[str]:
        """Return the most-preferred spelling of *unit*, or None if it has no entry."""
        spellings = self.lookup(unit)
        return spellings[0] if spellings else None

class BaseChunker(ABC):
    """Abstract base class for turning source text into typing chunks.

    Subclasses implement :meth:`chunk`; everything that does not depend on
    the script being chunked (policy handling, building the consumer-facing
    :class:`TypingTarget`) lives here.
    """

    def __init__(self, policy: Union[UnrecognizedPolicy, str, None] = None):
        if policy is None:
            from kanatype import UNRECOGNIZED_POLICY
            policy = UNRECOGNIZED_POLICY
        self.policy = UnrecognizedPolicy(policy)

    @abstractmethod
    def chunk(self, text: str) -> List[Chunk]:
        """Split *text* into chunks, left to right"""
        pass

    def to_target(self, text: str, fixed: bool = False, disabled: bool = False) -> TypingTarget:
        """Chunk *text* and wrap the result for the game layer."""
        return TypingTarget(chunks=tuple(self.chunk(text)), fixed=fixed, disabled=disabled)

    def _unrecognized(self, unit: str, text: str, position: int, reason: str) -> None:
        """Apply the unrecognized-input policy to *unit* found at *position*."""
        from kanatype.logger import logger

        if self.policy is UnrecognizedPolicy.raise_:
            raise UnrecognizedKanaError(unit, text, position, reason)
        logger.warning(f"⚠️ Skipping '{unit}' at position {position} in '{text}': {reason}")
