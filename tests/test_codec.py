"""Tests for recursive tree encoding and decoding."""

import math

import pytest

from pluggable_json.codec import TreeCodec
from pluggable_json.exceptions import FormatError
from pluggable_json.exceptions import SerializerError
from pluggable_json.exceptions import UnknownTypeError
from pluggable_json.exceptions import UnsupportedValueError
from pluggable_json.registry import SerializerRegistry
from pluggable_json.tagging import Tagger
from tests.examples.serializers import Duration
from tests.examples.serializers import duration_serializer
from tests.examples.serializers import infinity_serializer
from tests.examples.serializers import make_serializer


@pytest.fixture
def codec() -> TreeCodec:
    registry = SerializerRegistry([duration_serializer, infinity_serializer])
    return TreeCodec(registry, Tagger("$"))


class TestTreeCodecEncode:
    """Tests for TreeCodec.encode."""

    def test_scalars_unchanged(self, codec: TreeCodec) -> None:
        assert codec.encode({"number": 1}) == {"number": 1}
        for value in (None, True, False, 0, -3, 2.5):
            assert codec.encode(value) is value

    def test_opaque_value(self, codec: TreeCodec) -> None:
        assert codec.encode(Duration(10, "m")) == "$duration$10m"

    def test_strings_are_escaped(self, codec: TreeCodec) -> None:
        assert codec.encode("a$b") == "a^$b"
        assert codec.encode("$duration$10m") == "^$duration^$10m"

    def test_keys_are_untouched(self, codec: TreeCodec) -> None:
        encoded = codec.encode({"some$key": "x", "myDuration": Duration(1, "h")})
        assert encoded == {"some$key": "x", "myDuration": "$duration$1h"}

    def test_nested_containers(self, codec: TreeCodec) -> None:
        value = {"a": [Duration(1, "s"), {"b": [math.inf, "c$"]}], "d": (1, 2)}
        assert codec.encode(value) == {
            "a": ["$duration$1s", {"b": ["$infinity$Infinity", "c^$"]}],
            "d": [1, 2],
        }

    def test_serializer_may_claim_containers(self) -> None:
        """Serializers are consulted before the shape of a value."""
        pair = make_serializer(
            "pair", accepts=lambda v: isinstance(v, list) and len(v) == 2, prefix="p:"
        )
        codec = TreeCodec(SerializerRegistry([pair]), Tagger())

        assert codec.encode([[1, 2], [1, 2, 3]]) == "$pair$p:[[1, 2], [1, 2, 3]]"
        assert codec.encode([1, 2, 3]) == [1, 2, 3]

    def test_unsupported_value(self, codec: TreeCodec) -> None:
        with pytest.raises(UnsupportedValueError, match="object"):
            codec.encode({"x": object()})

    @pytest.mark.parametrize("key", [1, (1, 2), None])
    def test_non_string_key(self, codec: TreeCodec, key) -> None:
        with pytest.raises(UnsupportedValueError, match="Mapping keys must be str"):
            codec.encode({"outer": {key: "a"}})

    def test_unsupported_value_is_type_error(self, codec: TreeCodec) -> None:
        with pytest.raises(TypeError):
            codec.encode({1, 2})

    def test_serializer_must_return_string(self) -> None:
        bad = {
            "type": "bad",
            "is_serializable": lambda v: isinstance(v, complex),
            "serialize": lambda v: 1,
            "deserialize": lambda s: s,
        }
        codec = TreeCodec(SerializerRegistry([bad]), Tagger())

        with pytest.raises(SerializerError, match="'bad' returned int"):
            codec.encode(1j)

    def test_serializer_errors_propagate(self) -> None:
        def fail(value):
            raise RuntimeError("boom")

        failing = {
            "type": "fail",
            "is_serializable": lambda v: v == "trigger",
            "serialize": fail,
            "deserialize": lambda s: s,
        }
        codec = TreeCodec(SerializerRegistry([failing]), Tagger())

        with pytest.raises(RuntimeError, match="boom"):
            codec.encode(["ok", "trigger"])
        # The codec is still usable afterwards.
        assert codec.encode(["ok"]) == ["ok"]


class TestTreeCodecDecode:
    """Tests for TreeCodec.decode."""

    def test_tagged_string(self, codec: TreeCodec) -> None:
        assert codec.decode("$duration$10m") == Duration(10, "m")

    def test_plain_string(self, codec: TreeCodec) -> None:
        assert codec.decode("a^$b") == "a$b"

    def test_nested(self, codec: TreeCodec) -> None:
        tree = {"a": ["$duration$1s", {"b": ["$infinity$Infinity", "c^$"]}], "n": None}
        assert codec.decode(tree) == {"a": [Duration(1, "s"), {"b": [math.inf, "c$"]}], "n": None}

    def test_unknown_type(self, codec: TreeCodec) -> None:
        with pytest.raises(UnknownTypeError) as exc_info:
            codec.decode({"x": ["$mystery$payload"]})
        assert exc_info.value.type_name == "mystery"

    def test_malformed_tag(self, codec: TreeCodec) -> None:
        with pytest.raises(FormatError):
            codec.decode(["$duration"])

    def test_scalars_unchanged(self, codec: TreeCodec) -> None:
        assert codec.decode([1, 2.5, True, None]) == [1, 2.5, True, None]


class TestTreeCodecRoundTrip:
    """Round-trip properties of encode/decode."""

    @pytest.mark.parametrize(
        "value",
        [
            {
                "number": 1,
                "boolean": True,
                "string": "string",
                "str$ing": "str$ing",
                "null": None,
                "array": [1, True, {"a": "a string"}],
                "object": {"b": [1, "a", "ab$cc", "^$", "$"], "c": 2},
            },
            [Duration(1, "$")],
            [[Duration(10, "m")]],
            {"someObj": {"myDuration": Duration(10, "m"), "myInfinity": math.inf}},
            "",
            "^",
        ],
    )
    def test_round_trip(self, codec: TreeCodec, value) -> None:
        assert codec.decode(codec.encode(value)) == value

    @pytest.mark.parametrize("separator", ["$", "S", ":", "~"])
    def test_separator_collisions(self, separator: str) -> None:
        codec = TreeCodec(SerializerRegistry([duration_serializer]), Tagger(separator))
        value = {
            f"some{separator}Value": Duration(1, separator),
            "text": f"{separator}start^{separator}mid^end{separator}",
            "list": [separator, "^", f"^{separator}", Duration(2, "^")],
        }
        assert codec.decode(codec.encode(value)) == value
