"""Reading and writing REXPaint 1.02 ``.xp`` sprite files."""

from __future__ import annotations

import gzip
import os
import struct
from dataclasses import dataclass, field
from typing import List, Union

from roguekit.color import Color

PathLike = Union[str, "os.PathLike[str]"]

_HEADER = struct.Struct("<ii")
_TILE = struct.Struct("<I6B")
_GZIP_MAGIC = b"\x1f\x8b"
_TRANSPARENT_BACKGROUND = Color(255, 0, 255)


@dataclass(frozen=True)
class RexTile:
    """One cell of a sprite: a glyph code with foreground and background colours."""

    glyph: int = 0
    foreground: Color = field(default_factory=Color)
    background: Color = field(default_factory=Color)

    def _pack(self) -> bytes:
        return _TILE.pack(self.glyph, *self.foreground, *self.background)

    @classmethod
    def _unpack(cls, data: bytes, offset: int) -> "RexTile":
        glyph, fr, fg, fb, br, bg, bb = _TILE.unpack_from(data, offset)
        return cls(glyph, Color(fr, fg, fb), Color(br, bg, bb))


def is_transparent(tile: RexTile) -> bool:
    """REXPaint marks transparent cells with a 255,0,255 background."""
    return tile.background == _TRANSPARENT_BACKGROUND


def transparent_tile() -> RexTile:
    """Return a blank transparent cell."""
    return RexTile(0, Color(0, 0, 0), _TRANSPARENT_BACKGROUND)


class RexSprite:
    """A layered REXPaint image. Tiles are stored column by column."""

    def __init__(self, version: int, width: int, height: int, num_layers: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("sprite dimensions must not be negative")
        if num_layers < 0:
            raise ValueError("number of layers must not be negative")
        self._version = version
        self._width = width
        self._height = height
        size = width * height
        self._layers: List[List[RexTile]] = [[RexTile() for _ in range(size)]]
        self._layers += [[transparent_tile() for _ in range(size)] for _ in range(1, num_layers)]
        del self._layers[num_layers:]

    @property
    def version(self) -> int:
        return self._version

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def num_layers(self) -> int:
        return len(self._layers)

    @classmethod
    def load(cls, filename: PathLike) -> "RexSprite":
        """Load an ``.xp`` file; uncompressed data is accepted as well."""
        with open(filename, "rb") as handle:
            data = handle.read()
        if data[:2] == _GZIP_MAGIC:
            data = gzip.decompress(data)
        return cls._from_bytes(data)

    @classmethod
    def _from_bytes(cls, data: bytes) -> "RexSprite":
        if len(data) < _HEADER.size * 2:
            raise ValueError("truncated REXPaint header")
        version, num_layers = _HEADER.unpack_from(data, 0)
        width, height = _HEADER.unpack_from(data, _HEADER.size)
        sprite = cls(version, width, height, num_layers)

        offset = _HEADER.size
        size = width * height
        for layer in sprite._layers:
            if len(data) < offset + _HEADER.size:
                raise ValueError("truncated REXPaint layer header")
            if _HEADER.unpack_from(data, offset) != (width, height):
                raise ValueError("REXPaint layers differ in size")
            offset += _HEADER.size
            end = offset + size * _TILE.size
            if len(data) < end:
                raise ValueError("truncated REXPaint tile data")
            layer[:] = [RexTile._unpack(data, pos) for pos in range(offset, end, _TILE.size)]
            offset = end
        return sprite

    def _to_bytes(self) -> bytes:
        parts = [_HEADER.pack(self._version, self.num_layers)]
        for layer in self._layers:
            parts.append(_HEADER.pack(self._width, self._height))
            parts.extend(tile._pack() for tile in layer)
        return b"".join(parts)

    def save(self, filename: PathLike) -> None:
        """Write the sprite as a gzip-compressed ``.xp`` file."""
        with gzip.open(filename, "wb") as handle:
            handle.write(self._to_bytes())

    def _layer(self, layer: int) -> List[RexTile]:
        if not 0 <= layer < len(self._layers):
            raise IndexError(f"layer {layer} out of range")
        return self._layers[layer]

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"tile ({x}, {y}) out of range")
        return y + x * self._height

    def _check_index(self, index: int) -> int:
        if not 0 <= index < self._width * self._height:
            raise IndexError(f"tile index {index} out of range")
        return index

    def get_tile(self, layer: int, x: int, y: int) -> RexTile:
        """Tile at (x, y) of a layer; (0, 0) is the top-left corner."""
        return self._layer(layer)[self._index(x, y)]

    def set_tile(self, layer: int, x: int, y: int, tile: RexTile) -> None:
        """Replace the tile at (x, y) of a layer."""
        self._layer(layer)[self._index(x, y)] = tile

    def tile_at_index(self, layer: int, index: int) -> RexTile:
        """Tile by its position in the layer's storage."""
        return self._layer(layer)[self._check_index(index)]

    def set_tile_at_index(self, layer: int, index: int, tile: RexTile) -> None:
        """Replace a tile by its position in the layer's storage."""
        self._layer(layer)[self._check_index(index)] = tile

    def flatten(self) -> None:
        """Merge all layers into the first, respecting transparency."""
        while len(self._layers) > 1:
            overlay = self._layers.pop()
            below = self._layers[-1]
            for index, tile in enumerate(overlay):
                if not is_transparent(tile):
                    below[index] = tile