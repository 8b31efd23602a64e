"""Kana to romaji lookup table used by the typing chunker."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import jaconv

from kanatype.nlp.base import BaseRomanizationTable
from .kana import LONG_VOWEL_MARK

# Keyed by hiragana; katakana is folded onto these entries at lookup time.
# The first spelling of each entry is the one used to derive partial
# spellings (the doubled consonant typed for っ).
_HIRAGANA_ROMAJI: Dict[str, List[str]] = {
    # vowels
    "あ": ["a"], "い": ["i"], "う": ["u"], "え": ["e"], "お": ["o"],
    # k / g
    "か": ["ka"], "き": ["ki"], "く": ["ku"], "け": ["ke"], "こ": ["ko"],
    "が": ["ga"], "ぎ": ["gi"], "ぐ": ["gu"], "げ": ["ge"], "ご": ["go"],
    # s / z
    "さ": ["sa"], "し": ["shi", "si"], "す": ["su"], "せ": ["se"], "そ": ["so"],
    "ざ": ["za"], "じ": ["ji", "zi"], "ず": ["zu"], "ぜ": ["ze"], "ぞ": ["zo"],
    # t / d
    "た": ["ta"], "ち": ["chi", "ti"], "つ": ["tsu", "tu"], "て": ["te"], "と": ["to"],
    "だ": ["da"], "ぢ": ["ji", "di"], "づ": ["dzu", "du"], "で": ["de"], "ど": ["do"],
    # n
    "な": ["na"], "に": ["ni"], "ぬ": ["nu"], "ね": ["ne"], "の": ["no"],
    # h / b / p
    "は": ["ha"], "ひ": ["hi"], "ふ": ["fu", "hu"], "へ": ["he"], "ほ": ["ho"],
    "ば": ["ba"], "び": ["bi"], "ぶ": ["bu"], "べ": ["be"], "ぼ": ["bo"],
    "ぱ": ["pa"], "ぴ": ["pi"], "ぷ": ["pu"], "ぺ": ["pe"], "ぽ": ["po"],
    # m
    "ま": ["ma"], "み": ["mi"], "む": ["mu"], "め": ["me"], "も": ["mo"],
    # y
    "や": ["ya"], "ゆ": ["yu"], "よ": ["yo"],
    # r
    "ら": ["ra"], "り": ["ri"], "る": ["ru"], "れ": ["re"], "ろ": ["ro"],
    # w / n
    "わ": ["wa"], "ゐ": ["wi"], "ゑ": ["we"], "を": ["wo"],
    "ん": ["nn", "xn"],
    "ゔ": ["vu"],

    # you-on
    "きゃ": ["kya"], "きゅ": ["kyu"], "きょ": ["kyo"],
    "ぎゃ": ["gya"], "ぎゅ": ["gyu"], "ぎょ": ["gyo"],
    "しゃ": ["sha"], "しゅ": ["shu"], "しょ": ["sho"],
    "じゃ": ["ja"], "じゅ": ["ju"], "じょ": ["jo"],
    "ちゃ": ["cha"], "ちゅ": ["chu"], "ちょ": ["cho"],
    "ぢゃ": ["ja"], "ぢゅ": ["ju"], "ぢょ": ["jo"],
    "にゃ": ["nya"], "にゅ": ["nyu"], "にょ": ["nyo"],
    "ひゃ": ["hya"], "ひゅ": ["hyu"], "ひょ": ["hyo"],
    "びゃ": ["bya"], "びゅ": ["byu"], "びょ": ["byo"],
    "ぴゃ": ["pya"], "ぴゅ": ["pyu"], "ぴょ": ["pyo"],
    "みゃ": ["mya"], "みゅ": ["myu"], "みょ": ["myo"],
    "りゃ": ["rya"], "りゅ": ["ryu"], "りょ": ["ryo"],

    # foreign sounds, mostly seen in katakana loanwords
    "うぃ": ["wi"], "うぇ": ["we"], "うぉ": ["wo"],
    "ふぁ": ["fa"], "ふぃ": ["fi"], "ふぇ": ["fe"], "ふぉ": ["fo"],
    "てぃ": ["ti"], "でぃ": ["di"], "でゅ": ["dyu"],
    "しぇ": ["she"], "じぇ": ["je"], "ちぇ": ["che"],
    "ゔぁ": ["va"], "ゔぃ": ["vi"], "ゔぇ": ["ve"], "ゔぉ": ["vo"],

    # katakana long vowel mark, typed literally
    LONG_VOWEL_MARK: ["-"],
}

ROMAJI_TABLE: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {kana: tuple(spellings) for kana, spellings in _HIRAGANA_ROMAJI.items()}
)

class JapaneseRomanizationTable(BaseRomanizationTable):
    """Read-only kana -> romaji lookup.

    Units are either a single mora or a mora followed by a small kana
    (``きゃ``). Digraphs have their own entries because their spelling is
    not the concatenation of their parts: ``きゃ`` is ``kya``, not ``kiya``.
    Hiragana and katakana with the same sound return the same tuple.
    """

    def __init__(self, table: Mapping[str, Tuple[str, ...]] = ROMAJI_TABLE):
        self._table = table

    def lookup(self, unit: str) -> Optional[Tuple[str, ...]]:
        if not unit:
            return None
        return self._table.get(jaconv.kata2hira(unit))

    def __len__(self) -> int:
        return len(self._table)
