"""Tests for the tagged string wire representation."""

import pytest

from pluggable_json.exceptions import FormatError
from pluggable_json.tagging import TaggedValue
from pluggable_json.tagging import Tagger


class TestTaggerEncode:
    """Tests for Tagger.encode_tagged and Tagger.encode_plain."""

    def test_encode_tagged(self) -> None:
        assert Tagger().encode_tagged("duration", "10m") == "$duration$10m"

    def test_encode_tagged_escapes_tag_and_payload(self) -> None:
        assert Tagger().encode_tagged("my$type", "1$") == "$my^$type$1^$"

    def test_encode_plain_never_starts_with_separator(self) -> None:
        tagger = Tagger()
        encoded = tagger.encode_plain("$not a tag")
        assert encoded == "^$not a tag"
        assert not tagger.is_tagged(encoded)

    def test_encode_with_custom_separator(self) -> None:
        assert Tagger("S").encode_tagged("duration", "1S") == "SdurationS1^S"


class TestTaggerDecode:
    """Tests for Tagger.decode."""

    def test_plain_string(self) -> None:
        assert Tagger().decode("a^$b") == TaggedValue(None, "a$b")

    def test_empty_string(self) -> None:
        assert Tagger().decode("") == TaggedValue(None, "")

    def test_tagged_string(self) -> None:
        assert Tagger().decode("$duration$10m") == TaggedValue("duration", "10m")

    def test_payload_may_contain_live_separators(self) -> None:
        """Only the first live separator after the leading one is the boundary."""
        assert Tagger().decode("$t$a$b") == TaggedValue("t", "a$b")

    def test_escaped_separator_in_tag_is_not_the_boundary(self) -> None:
        assert Tagger().decode("$my^$type$payload") == TaggedValue("my$type", "payload")

    def test_escape_char_followed_by_escape_char(self) -> None:
        """An escape char followed by another escape char keeps the following separator escaped."""
        assert Tagger().decode("$a^^$b$c") == TaggedValue("a^$b", "c")

    def test_escape_char_not_before_separator_is_literal(self) -> None:
        assert Tagger().decode("$a^b$c^") == TaggedValue("a^b", "c^")

    def test_empty_payload(self) -> None:
        assert Tagger().decode("$type$") == TaggedValue("type", "")

    @pytest.mark.parametrize("text", ["$", "$duration", "$dur^$ation", "$abc^$"])
    def test_missing_boundary_raises(self, text: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            Tagger().decode(text)
        assert exc_info.value.value == text

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Tagger().decode("$nope")

    @pytest.mark.parametrize(
        ("tag", "payload"),
        [
            ("duration", "10m"),
            ("a$b", "c$d"),
            ("x", "$"),
            ("x", "^"),
            ("x", "^$"),
            ("a^b", "$$^^"),
            ("t", ""),
        ],
    )
    def test_tagged_round_trip(self, tag: str, payload: str) -> None:
        tagger = Tagger()
        assert tagger.decode(tagger.encode_tagged(tag, payload)) == TaggedValue(tag, payload)

    def test_custom_separator(self) -> None:
        tagger = Tagger("S")
        encoded = tagger.encode_tagged("duration", "1S")
        assert encoded == "SdurationS1^S"
        assert tagger.decode(encoded) == TaggedValue("duration", "1S")
