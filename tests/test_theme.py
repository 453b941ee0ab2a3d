import pytest

from markedit.theme import ColorName, GitHubTheme


@pytest.fixture
def theme():
    return GitHubTheme()


def test_background_color(theme):
    assert theme.color(ColorName.BACKGROUND) == (0xE6, 0xEA, 0xED, 0xFF)


def test_selection_is_translucent_primary(theme):
    selection = theme.color(ColorName.SELECTION)
    primary = theme.color(ColorName.PRIMARY)
    assert selection[:3] == primary[:3]
    assert selection.a == 0x40


def test_focus_matches_primary(theme):
    assert theme.color(ColorName.FOCUS) == theme.color(ColorName.PRIMARY)


def test_name_given_as_string(theme):
    assert theme.color("foreground") == theme.color(ColorName.FOREGROUND)


def test_unknown_name_raises(theme):
    with pytest.raises(ValueError):
        theme.color("no-such-colour")


@pytest.mark.parametrize("name", list(ColorName))
def test_every_name_has_valid_channels(theme, name):
    rgba = theme.color(name)
    assert len(rgba) == 4
    assert all(0 <= channel <= 255 for channel in rgba)


@pytest.mark.parametrize("name", list(ColorName))
def test_hex_color_round_trips_rgb(theme, name):
    text = theme.hex_color(name)
    rgba = theme.color(name)
    assert len(text) == 7 and text.startswith("#")
    assert (int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16)) == rgba[:3]


def test_hex_color_of_input_background(theme):
    assert theme.hex_color(ColorName.INPUT_BACKGROUND) == "#ffffff"