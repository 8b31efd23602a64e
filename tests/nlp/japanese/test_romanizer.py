"""Tests for the Japanese romanization table."""
import pytest
from kanatype.nlp.japanese.kana import HIRAGANA, KATAKANA
from kanatype.nlp.japanese.romanizer import ROMAJI_TABLE


class TestJapaneseRomanizationTable:
    """Test kana unit lookups."""

    def test_single_mora(self, table):
        assert table.lookup("か") == ("ka",)

    def test_multiple_spellings_keep_order(self, table):
        assert table.lookup("し") == ("shi", "si")
        assert table.lookup("つ") == ("tsu", "tu")
        assert table.primary("ふ") == "fu"

    def test_digraph_has_its_own_spelling(self, table):
        assert table.lookup("きゃ") == ("kya",)
        assert table.lookup("ちゃ") == ("cha",)
        assert table.lookup("じょ") == ("jo",)

    @pytest.mark.parametrize("hiragana,katakana", [
        ("か", "カ"), ("し", "シ"), ("ん", "ン"), ("を", "ヲ"),
        ("ゐ", "ヰ"), ("ゔ", "ヴ"), ("きゃ", "キャ"), ("ちょ", "チョ"),
    ])
    def test_scripts_share_spellings(self, table, hiragana, katakana):
        assert table.lookup(hiragana) is table.lookup(katakana)

    def test_foreign_sound_digraphs(self, table):
        assert table.lookup("ウェ") == ("we",)
        assert table.lookup("ファ") == ("fa",)
        assert table.lookup("ティ") == ("ti",)
        assert table.lookup("ヴァ") == ("va",)

    def test_long_vowel_mark(self, table):
        assert table.lookup("ー") == ("-",)

    @pytest.mark.parametrize("unit", ["ゃ", "ァ", "っ", "京", "a", "", "かき", "くゃ"])
    def test_unrecognized_units(self, table, unit):
        assert table.lookup(unit) is None
        assert unit not in table

    def test_lookup_is_repeatable(self, table):
        first = table.lookup("し")
        for _ in range(3):
            assert table.lookup("し") == first
        assert table.lookup("し") is first

    def test_every_mora_has_spellings(self, table):
        for ch in HIRAGANA + KATAKANA:
            spellings = table.lookup(ch)
            assert spellings, ch
            assert all(spellings), ch

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ROMAJI_TABLE["か"] = ("ca",)
        assert isinstance(ROMAJI_TABLE["か"], tuple)
