"""Tests for the chunk and typing target models."""
import json
import pytest
from pydantic import ValidationError
from kanatype.schema import Chunk, TypingTarget


class TestChunk:
    """Test the Chunk model."""

    def test_list_of_spellings_becomes_tuple(self):
        chunk = Chunk(displayed="し", accepted=["shi", "si"])
        assert chunk.accepted == ("shi", "si")

    def test_primary_is_first_spelling(self):
        chunk = Chunk(displayed="し", accepted=("shi", "si"))
        assert chunk.primary == "shi"

    def test_matches_any_complete_spelling(self):
        """Any listed spelling completes the chunk; prefixes do not."""
        chunk = Chunk(displayed="し", accepted=("shi", "si"))
        assert chunk.matches("shi")
        assert chunk.matches("si")
        assert not chunk.matches("sh")
        assert not chunk.matches("s")

    def test_empty_displayed_rejected(self):
        with pytest.raises(ValidationError):
            Chunk(displayed="", accepted=("a",))

    def test_empty_accepted_rejected(self):
        with pytest.raises(ValidationError):
            Chunk(displayed="あ", accepted=())

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            Chunk(displayed="あ", accepted=("a",), fixed=True)

    def test_frozen(self):
        chunk = Chunk(displayed="あ", accepted=("a",))
        with pytest.raises(ValidationError):
            chunk.displayed = "い"

    def test_equality(self):
        assert Chunk(displayed="か", accepted=["ka"]) == Chunk(displayed="か", accepted=("ka",))


class TestTypingTarget:
    """Test the TypingTarget model."""

    @pytest.fixture
    def target(self):
        return TypingTarget(chunks=(
            Chunk(displayed="っ", accepted=("k",)),
            Chunk(displayed="か", accepted=("ka",)),
            Chunk(displayed="し", accepted=("shi", "si")),
        ))

    def test_flags_default_to_false(self, target):
        assert target.fixed is False
        assert target.disabled is False

    def test_parallel_views(self, target):
        assert target.displayed_chunks == ["っ", "か", "し"]
        assert target.typed_chunks == ["k", "ka", "shi"]
        assert target.displayed_text == "っかし"

    def test_flagged_copy_leaves_original_untouched(self, target):
        fixed = target.model_copy(update={"fixed": True})
        assert fixed.fixed is True
        assert target.fixed is False
        assert fixed.chunks == target.chunks

    def test_empty_target(self):
        target = TypingTarget()
        assert target.chunks == ()
        assert target.displayed_text == ""

    def test_json_dump(self, target):
        data = json.loads(target.model_dump_json())
        assert data["chunks"][0] == {"displayed": "っ", "accepted": ["k"]}
        assert data["fixed"] is False
        assert data["disabled"] is False
