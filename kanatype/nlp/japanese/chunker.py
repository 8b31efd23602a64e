"""Split mixed kana/kanji text into typing chunks."""

from typing import List, Optional, Tuple, Union

from kanatype.nlp.base import BaseChunker, BaseRomanizationTable, UnrecognizedPolicy
from kanatype.schema import Chunk
from .kana import is_kana, is_mora, is_sokuon, is_sutegana
from .romanizer import JapaneseRomanizationTable

OPEN_PAREN = "("
CLOSE_PAREN = ")"

class JapaneseChunker(BaseChunker):
    """Single-pass scanner over Japanese practice text.

    At every cursor position exactly one of three rules applies:

    * furigana: a run of non-kana text followed by ``(reading)`` becomes one
      chunk whose only accepted spelling is the reading, taken literally;
    * kana unit: an optional っ, one mora and an optional small kana that
      forms a digraph with it, looked up in the romanization table;
    * fallback: anything else is skipped (or raises, under the ``raise``
      policy).

    Every step consumes at least one character, so the scan always ends.
    """

    def __init__(
        self,
        table: Optional[BaseRomanizationTable] = None,
        policy: Union[UnrecognizedPolicy, str, None] = None,
    ):
        super().__init__(policy)
        self.table = table if table is not None else JapaneseRomanizationTable()

    def chunk(self, text: str) -> List[Chunk]:
        from kanatype.logger import logger

        chunks: List[Chunk] = []
        pos = 0
        while pos < len(text):
            ch = text[pos]

            furigana = self._match_furigana(text, pos)
            if furigana is not None:
                chunk, pos = furigana
                chunks.append(chunk)
            elif is_kana(ch):
                unit_chunks, pos = self._consume_kana_unit(text, pos)
                chunks.extend(unit_chunks)
            else:
                self._unrecognized(ch, text, pos, "not kana and not followed by a reading")
                pos += 1

        logger.debug(f"Chunked '{text}' into {len(chunks)} chunks")
        return chunks

    def _match_furigana(self, text: str, start: int) -> Optional[Tuple[Chunk, int]]:
        """Match ``<run>(<reading>)`` at *start*.

        The run is maximal: it extends up to the first kana or opening
        parenthesis. Returns the chunk and the position after ``)``, or
        None when the run is empty, is not directly followed by ``(``, or
        the parenthetical is unclosed or empty.
        """
        end = start
        while end < len(text) and text[end] != OPEN_PAREN and not is_kana(text[end]):
            end += 1
        if end == start or end >= len(text) or text[end] != OPEN_PAREN:
            return None

        close = text.find(CLOSE_PAREN, end + 1)
        if close == -1 or close == end + 1:
            return None

        reading = text[end + 1:close]
        return Chunk(displayed=text[start:end], accepted=(reading,)), close + 1

    def _consume_kana_unit(self, text: str, start: int) -> Tuple[List[Chunk], int]:
        """Consume [っ] mora [small kana] at *start*.

        Returns the chunks for the unit (none, one, or two when a っ precedes
        it) and the position after everything consumed.
        """
        pos = start
        sokuon = None
        if is_sokuon(text[pos]):
            sokuon = text[pos]
            pos += 1

        if pos >= len(text) or not is_mora(text[pos]):
            if sokuon is not None:
                self._unrecognized(sokuon, text, start, "sokuon is not followed by a mora")
            else:
                self._unrecognized(text[pos], text, pos, "small kana without a preceding mora")
                pos += 1
            return [], pos

        unit = text[pos]
        pos += 1
        # A small kana that does not form a digraph is left for the next unit
        if pos < len(text) and is_sutegana(text[pos]) and (unit + text[pos]) in self.table:
            unit += text[pos]
            pos += 1

        spellings = self.table.lookup(unit)
        if spellings is None:
            self._unrecognized(unit, text, pos - len(unit), "no romanization for this kana")
            return [], pos

        chunks = []
        if sokuon is not None:
            chunks.append(Chunk(displayed=sokuon, accepted=(spellings[0][0],)))
        chunks.append(Chunk(displayed=unit, accepted=spellings))
        return chunks, pos

def romanize(text: str, chunker: Optional[JapaneseChunker] = None) -> str:
    """Join the primary spelling of every chunk of *text*.

    Readings given in parentheses are included verbatim.
    """
    chunker = chunker if chunker is not None else JapaneseChunker()
    return "".join(chunk.primary for chunk in chunker.chunk(text))
