"""Registry of bitmap fonts and the textures that back them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class BitmapFont:
    """A font: the tag of its texture and the pixel size of one character."""

    texture_tag: str
    character_size: Tuple[int, int]


class FontRegistry:
    """Maps font tags to bitmap fonts, and texture tags to image files."""

    def __init__(self) -> None:
        self.fonts: Dict[str, BitmapFont] = {}
        self.textures: Dict[str, str] = {}

    def get_font(self, font_tag: str) -> BitmapFont:
        try:
            return self.fonts[font_tag]
        except KeyError:
            raise KeyError(f"Unable to locate bitmap font with tag {font_tag}") from None

    def _register_texture(self, filename: str, texture_tag: str) -> None:
        if not os.path.isfile(filename):
            raise FileNotFoundError(f"No such texture resource: {texture_tag}")
        self.textures[texture_tag] = filename

    def register_font(self, font_tag: str, filename: str, width: int = 8, height: int = 8) -> BitmapFont:
        """Register the font image in filename under font_tag."""
        if font_tag in self.fonts:
            raise ValueError(f"Attempting to insert duplicate font with tag {font_tag}")
        texture_tag = "font_tex_" + filename
        self._register_texture(filename, texture_tag)
        font = BitmapFont(texture_tag, (width, height))
        self.fonts[font_tag] = font
        return font

    def register_font_directory(self, path: str) -> None:
        """Register every font listed as tag,file,width,height in path/fonts.txt."""
        if not os.path.exists(path):
            raise FileNotFoundError("Font directory does not exist.")
        info_file = path + "/fonts.txt"
        if not os.path.exists(info_file):
            raise FileNotFoundError("No fonts.txt file in font directory.")

        with open(info_file, encoding="utf-8") as handle:
            for line in handle.read().splitlines():
                parts = line.split(",")
                if parts and parts[-1] == "":
                    parts.pop()
                if len(parts) == 4:
                    tag, filename, width, height = parts
                    self.register_font(tag, path + "/" + filename, int(width), int(height))