import pytest

from _trailerio.config import DEFAULT_CONFIG, TrailerConfig


def test_defaults():
    assert DEFAULT_CONFIG.comment_char == b"#"
    assert DEFAULT_CONFIG.separators == b":"
    assert DEFAULT_CONFIG.generated_prefixes == (
        b"Signed-off-by: ",
        b"(cherry picked from commit ",
    )
    assert DEFAULT_CONFIG.patch_marker == b"---"
    assert DEFAULT_CONFIG.conflicts_header == b"Conflicts:\n"


def test_str_values_are_encoded():
    config = TrailerConfig(
        comment_char=";", separators=":=", generated_prefixes=["Change-Id: "]
    )
    assert config.comment_char == b";"
    assert config.separators == b":="
    assert config.generated_prefixes == (b"Change-Id: ",)


def test_config_is_hashable():
    assert hash(TrailerConfig()) == hash(DEFAULT_CONFIG)


@pytest.mark.parametrize(
    "options",
    [
        {"comment_char": ""},
        {"comment_char": "##"},
        {"separators": ""},
        {"separators": "a"},
        {"separators": " "},
        {"separators": "\n"},
        {"separators": "-"},
        {"patch_marker": ""},
        {"conflicts_header": ""},
        {"generated_prefixes": [""]},
    ],
)
def test_invalid_config(options):
    with pytest.raises(ValueError):
        TrailerConfig(**options)


def test_from_dict():
    config = TrailerConfig.from_dict(
        {"separators": ":#", "generated_prefixes": ["Signed-off-by: "]}
    )
    assert config == TrailerConfig(
        separators=b":#", generated_prefixes=(b"Signed-off-by: ",)
    )


def test_from_dict_unknown_option():
    with pytest.raises(ValueError, match="separator"):
        TrailerConfig.from_dict({"separator": ":"})


@pytest.mark.parametrize("prefix", ["Change-Id: ", b"Change-Id: "])
def test_single_generated_prefix_is_not_split(prefix):
    assert TrailerConfig(generated_prefixes=prefix).generated_prefixes == (
        b"Change-Id: ",
    )
    assert TrailerConfig.from_dict(
        {"generated_prefixes": prefix}
    ).generated_prefixes == (b"Change-Id: ",)
