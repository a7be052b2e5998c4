import pytest

from pixelyard.text import banner_height, create_text


def test_banner_height_for_default_text():
    assert banner_height(800, 7) == 228


def test_banner_height_two_characters_is_full_width():
    assert banner_height(800, 2) == 800


def test_banner_height_shrinks_with_longer_text():
    heights = [banner_height(800, n) for n in range(1, 20)]
    assert heights == sorted(heights, reverse=True)


def test_banner_height_rejects_empty_text():
    with pytest.raises(ValueError):
        banner_height(800, 0)


def test_create_text_with_default_font():
    surface = create_text("telhgxt", 48, (255, 255, 0, 255), None)
    width, height = surface.get_size()
    assert width > 0 and height > 0


def test_longer_text_is_wider():
    short = create_text("ab", 32, (255, 255, 0, 255), None)
    long = create_text("abcdefgh", 32, (255, 255, 0, 255), None)
    assert long.get_width() > short.get_width()


def test_text_uses_requested_colour():
    surface = create_text("HHHH", 48, (255, 255, 0, 255), None)
    colours = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(surface.get_width())
        for y in range(surface.get_height())
    }
    assert (255, 255, 0) in colours


def test_missing_font_gives_none(tmp_path):
    assert create_text("hello", 24, (255, 255, 0, 255), str(tmp_path / "missing.ttf")) is None