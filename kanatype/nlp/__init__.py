"""Language processing module for kanatype

This module turns practice text into the typing chunks consumed by the game,
one subpackage per supported language.
"""

from typing import Union

from .base import (
    BaseChunker,
    BaseRomanizationTable,
    UnrecognizedKanaError,
    UnrecognizedPolicy,
)

def get_romanization_table(language: str) -> BaseRomanizationTable:
    """Get the romanization table for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific romanization table instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.romanizer import JapaneseRomanizationTable
        return JapaneseRomanizationTable()
    else:
        raise ValueError(f"Unsupported language for romanization: {language}")

def get_chunker(language: str, policy: Union[UnrecognizedPolicy, str, None] = None) -> BaseChunker:
    """Get a typing chunker for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)
        policy: 'skip' or 'raise' for input that cannot be chunked;
            defaults to the KANATYPE_UNRECOGNIZED_POLICY setting

    Returns:
        Language-specific chunker instance

    Raises:
        ValueError: If language or policy is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.chunker import JapaneseChunker
        return JapaneseChunker(policy=policy)
    else:
        raise ValueError(f"Unsupported language for chunking: {language}")

__all__ = [
    'BaseChunker',
    'BaseRomanizationTable',
    'UnrecognizedKanaError',
    'UnrecognizedPolicy',
    'get_romanization_table',
    'get_chunker'
]
