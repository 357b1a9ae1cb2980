import pytest

from kv_flat.errors import ConfigError, MalformedIndexError
from kv_flat.key_mapping.codec import PathCodec
from kv_flat.options import ArrayDelimiter, Options


def test_path_codec_join_key_and_index_without_brackets() -> None:
    codec = PathCodec(Options())
    assert codec.join_key("", "hello") == "hello"
    assert codec.join_key("hello", "world") == "hello.world"
    assert codec.join_index("hello", 0) == "hello.0"
    assert codec.join_index("", 3) == "3"


@pytest.mark.parametrize(
    ("array_delimiter", "expected"),
    [
        ("PARENS", "hello(1)"),
        ("BRACKETS", "hello[1]"),
        ("CURLY_BRACES", "hello{1}"),
        (ArrayDelimiter.BRACKETS, "hello[1]"),
        ("brackets", "hello[1]"),
    ],
)
def test_path_codec_join_index_with_brackets(array_delimiter: str | ArrayDelimiter, expected: str) -> None:
    codec = PathCodec(Options(array_delimiter=array_delimiter))
    assert codec.join_index("hello", 1) == expected
    assert codec.join_index("", 1) == expected.removeprefix("hello")


def test_path_codec_split_without_brackets_never_yields_indices() -> None:
    codec = PathCodec(Options())
    assert codec.split("hello.world.0") == ("hello", "world", "0")
    assert codec.split("hello") == ("hello",)
    assert codec.split("") == ("",)


def test_path_codec_split_with_brackets() -> None:
    codec = PathCodec(Options(array_delimiter="BRACKETS"))
    assert codec.split("hello.world[0]") == ("hello", "world", 0)
    assert codec.split("hello[2][10].name") == ("hello", 2, 10, "name")
    assert codec.split("[0].name") == ("", 0, "name")
    assert codec.split("[0][1]") == ("", 0, 1)
    assert codec.split("hello") == ("hello",)


def test_path_codec_encode_is_inverse_of_split() -> None:
    codec = PathCodec(Options(delimiter=":", array_delimiter="PARENS"))
    segments = ("hello", 2, "world", 0, 1)
    assert codec.encode(segments) == "hello(2):world(0)(1)"
    assert codec.split(codec.encode(segments)) == segments


@pytest.mark.parametrize("flat_key", ["hello[x]", "hello[]", "hello[-1]", "hello[1", "hello[1.5]", "hello[１]"])
def test_path_codec_split_rejects_malformed_index(flat_key: str) -> None:
    codec = PathCodec(Options(array_delimiter="BRACKETS"))
    with pytest.raises(MalformedIndexError, match="malformed array index segment") as excinfo:
        _ = codec.split(flat_key)
    assert excinfo.value.key == flat_key
    assert excinfo.value.segment.startswith("[")


def test_options_defaults() -> None:
    options = Options()
    assert options.delimiter == "."
    assert options.safe is False
    assert options.max_depth == 0
    assert options.array_delimiter is ArrayDelimiter.NONE
    assert options.slice_deep_merge is False
    assert options.overwrite_nil_in_maps is False


@pytest.mark.parametrize("array_delimiter", ["", None, "NONE", ArrayDelimiter.NONE])
def test_options_array_delimiter_none_aliases(array_delimiter: str | ArrayDelimiter | None) -> None:
    assert Options(array_delimiter=array_delimiter).array_delimiter is ArrayDelimiter.NONE


def test_options_rejects_invalid_inputs() -> None:
    with pytest.raises(ConfigError, match="array delimiter not supported"):
        _ = Options(array_delimiter="ANGLES")
    with pytest.raises(ConfigError, match="delimiter must not be empty"):
        _ = Options(delimiter="")
    with pytest.raises(ConfigError, match="max_depth must not be negative"):
        _ = Options(max_depth=-1)
    with pytest.raises(ConfigError, match="delimiter must not contain array delimiter brackets"):
        _ = Options(delimiter="[", array_delimiter="BRACKETS")


def test_options_with_returns_validated_copy() -> None:
    options = Options(delimiter=":")
    changed = options.with_(array_delimiter="PARENS")
    assert changed.delimiter == ":"
    assert changed.array_delimiter is ArrayDelimiter.PARENS
    assert options.array_delimiter is ArrayDelimiter.NONE
    with pytest.raises(ConfigError):
        _ = options.with_(max_depth=-2)


def test_config_errors_are_value_errors() -> None:
    with pytest.raises(ValueError, match="array delimiter not supported"):
        _ = Options(array_delimiter="ANGLES")
