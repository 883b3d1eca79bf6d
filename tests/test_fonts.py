import pytest

from roguekit.fonts import BitmapFont, FontRegistry


@pytest.fixture
def font_dir(tmp_path):
    (tmp_path / "terminal8x8.png").write_bytes(b"image")
    (tmp_path / "terminal8x16.png").write_bytes(b"image")
    (tmp_path / "fonts.txt").write_text(
        "8x8,terminal8x8.png,8,8\n"
        "this line is ignored\n"
        "\n"
        "8x16,terminal8x16.png,8,16\n",
        encoding="utf-8",
    )
    return tmp_path


def test_register_and_get(tmp_path):
    image = tmp_path / "font.png"
    image.write_bytes(b"image")
    registry = FontRegistry()
    registry.register_font("main", str(image), 12, 24)
    font = registry.get_font("main")
    assert font == BitmapFont("font_tex_" + str(image), (12, 24))
    assert registry.textures[font.texture_tag] == str(image)


def test_default_character_size(tmp_path):
    image = tmp_path / "font.png"
    image.write_bytes(b"image")
    registry = FontRegistry()
    font = registry.register_font("main", str(image))
    assert font.character_size == (8, 8)


def test_duplicate_font_rejected(tmp_path):
    image = tmp_path / "font.png"
    image.write_bytes(b"image")
    registry = FontRegistry()
    registry.register_font("main", str(image))
    with pytest.raises(ValueError, match="duplicate font"):
        registry.register_font("main", str(image))


def test_unknown_font_raises():
    with pytest.raises(KeyError):
        FontRegistry().get_font("missing")


def test_missing_texture_raises(tmp_path):
    registry = FontRegistry()
    with pytest.raises(FileNotFoundError):
        registry.register_font("main", str(tmp_path / "absent.png"))
    assert "main" not in registry.fonts


def test_register_directory(font_dir):
    registry = FontRegistry()
    registry.register_font_directory(str(font_dir))
    assert sorted(registry.fonts) == ["8x16", "8x8"]
    tall = registry.get_font("8x16")
    assert tall.character_size == (8, 16)
    assert tall.texture_tag == "font_tex_" + str(font_dir) + "/terminal8x16.png"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="directory does not exist"):
        FontRegistry().register_font_directory(str(tmp_path / "nowhere"))


def test_missing_fonts_txt_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="fonts.txt"):
        FontRegistry().register_font_directory(str(tmp_path))


def test_bad_size_in_fonts_txt_raises(tmp_path):
    (tmp_path / "f.png").write_bytes(b"image")
    (tmp_path / "fonts.txt").write_text("f,f.png,wide,8\n", encoding="utf-8")
    with pytest.raises(ValueError):
        FontRegistry().register_font_directory(str(tmp_path))