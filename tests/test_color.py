import pytest

from giallo.color import (
    Color,
    GialloError,
    InvalidHexColorError,
    css_light_dark_bg_color_property,
    css_light_dark_color_property,
)

HEX_CASES = [
    ("#F00", Color(255, 0, 0, 255)),
    ("#0F0", Color(0, 255, 0, 255)),
    ("#00F", Color(0, 0, 255, 255)),
    ("#FFF", Color(255, 255, 255, 255)),
    ("#000", Color(0, 0, 0, 255)),
    ("#888", Color(136, 136, 136, 255)),
    ("#369", Color(51, 102, 153, 255)),
    ("#F00F", Color(255, 0, 0, 255)),
    ("#0F0F", Color(0, 255, 0, 255)),
    ("#00FF", Color(0, 0, 255, 255)),
    ("#FFF0", Color(255, 255, 255, 0)),
    ("#0008", Color(0, 0, 0, 136)),
    ("#FFFA", Color(255, 255, 255, 170)),
    ("#FF0000", Color(255, 0, 0, 255)),
    ("#00FF00", Color(0, 255, 0, 255)),
    ("#0000FF", Color(0, 0, 255, 255)),
    ("#FFFFFF", Color(255, 255, 255, 255)),
    ("#000000", Color(0, 0, 0, 255)),
    ("#808080", Color(128, 128, 128, 255)),
    ("#FF00FF", Color(255, 0, 255, 255)),
    ("#00FFFF", Color(0, 255, 255, 255)),
    ("#FFFF00", Color(255, 255, 0, 255)),
    ("#123456", Color(18, 52, 86, 255)),
    ("#ABCDEF", Color(171, 205, 239, 255)),
    ("#FF0000FF", Color(255, 0, 0, 255)),
    ("#00FF00FF", Color(0, 255, 0, 255)),
    ("#0000FFFF", Color(0, 0, 255, 255)),
    ("#FFFFFF00", Color(255, 255, 255, 0)),
    ("#00000000", Color(0, 0, 0, 0)),
    ("#80808080", Color(128, 128, 128, 128)),
    ("#FF00FF80", Color(255, 0, 255, 128)),
    ("#00FFFFCC", Color(0, 255, 255, 204)),
    ("#FFFF0033", Color(255, 255, 0, 51)),
    ("FF0000", Color(255, 0, 0, 255)),
    ("F00", Color(255, 0, 0, 255)),
    ("FF0000FF", Color(255, 0, 0, 255)),
    ("#ff0000", Color(255, 0, 0, 255)),
    ("#Ff0000", Color(255, 0, 0, 255)),
    ("#aAbBcC", Color(170, 187, 204, 255)),
    ("#333333", Color(51, 51, 51, 255)),
    ("#fffffe", Color(255, 255, 254, 255)),
    ("#bbbbbb", Color(187, 187, 187, 255)),
    ("#1e1e1e", Color(30, 30, 30, 255)),
]


@pytest.mark.parametrize("text, expected", HEX_CASES)
def test_can_parse_hex_colors(text, expected):
    assert Color.from_hex(text) == expected


@pytest.mark.parametrize("text", ["#FF", "#FFFFF", "#GGGGGG"])
def test_error_on_invalid_format(text):
    with pytest.raises(InvalidHexColorError):
        Color.from_hex(text)


def test_invalid_error_is_giallo_error():
    with pytest.raises(GialloError) as info:
        Color.from_hex("#GGGGGG")
    assert info.value.value == "#GGGGGG"


def test_named_colors():
    assert Color.from_hex("white") == Color(255, 255, 255, 255)
    assert Color.from_hex("#black") == Color(0, 0, 0, 255)


def test_as_hex_opaque_omits_alpha():
    assert Color(255, 0, 0).as_hex() == "#FF0000"


def test_as_hex_keeps_alpha_when_translucent():
    assert Color.from_hex("#A0A1A7cc").as_hex() == "#A0A1A7CC"


@pytest.mark.parametrize("text, _", HEX_CASES)
def test_hex_round_trip(text, _):
    color = Color.from_hex(text)
    assert Color.from_hex(color.as_hex()) == color


def test_css_properties():
    color = Color.from_hex("#23262E")
    assert color.as_css_color_property() == "color: #23262E;"
    assert color.as_css_bg_color_property() == "background-color: #23262E;"


def test_light_dark_properties():
    light = Color.from_hex("#FFFFFF")
    dark = Color.from_hex("#000000")
    assert css_light_dark_color_property(light, dark) == (
        "color: light-dark(#FFFFFF, #000000);"
    )
    assert css_light_dark_bg_color_property(light, dark) == (
        "background-color: light-dark(#FFFFFF, #000000);"
    )


def test_ansi_escapes():
    color = Color.from_hex("#123456")
    assert color.as_ansi_fg() == "38;2;18;52;86"
    assert color.as_ansi_bg() == "48;2;18;52;86"