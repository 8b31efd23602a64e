"""Japanese typing-chunk module."""

from .kana import HIRAGANA, KATAKANA, SUTEGANA, SOKUON, LONG_VOWEL_MARK
from .romanizer import JapaneseRomanizationTable, ROMAJI_TABLE
from .chunker import JapaneseChunker, romanize

__all__ = [
    'HIRAGANA',
    'KATAKANA',
    'SUTEGANA',
    'SOKUON',
    'LONG_VOWEL_MARK',
    'JapaneseRomanizationTable',
    'ROMAJI_TABLE',
    'JapaneseChunker',
    'romanize'
]
