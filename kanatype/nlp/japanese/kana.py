"""Kana inventory used to classify characters while chunking."""

HIRAGANA = (
    "あいうえおかがきぎくぐけげこごさざしじすずせぜそぞただちぢつづてでとど"
    "なにぬねのはばぱひびぴふぶぷへべぺほぼぽまみむめもやゆよらりるれろわゐゑをんゔー"
)
KATAKANA = (
    "アイウエオカガキギクグケゲコゴサザシジスズセゼソゾタダチヂツヅテデトド"
    "ナニヌネノハバパヒビピフブプヘベペホボポマミムメモヤユヨラリルレロワヰヱヲンヴー"
)
# Small kana that only ever appear as the tail of a digraph
SUTEGANA = "ァィゥェォャュョぁぃぅぇぉゃゅょ"
SOKUON = "っッ"
LONG_VOWEL_MARK = "ー"

_MORAE = frozenset(HIRAGANA + KATAKANA)
_SUTEGANA = frozenset(SUTEGANA)
_SOKUON = frozenset(SOKUON)

def is_mora(ch: str) -> bool:
    return ch in _MORAE

def is_sutegana(ch: str) -> bool:
    return ch in _SUTEGANA

def is_sokuon(ch: str) -> bool:
    return ch in _SOKUON

def is_kana(ch: str) -> bool:
    """True for any character the kana rules know how to consume."""
    return ch in _MORAE or ch in _SUTEGANA or ch in _SOKUON
