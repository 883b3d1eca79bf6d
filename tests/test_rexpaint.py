import gzip
import struct

import pytest

from roguekit.color import Color
from roguekit.rexpaint import RexSprite, RexTile, is_transparent, transparent_tile


def _sample_sprite():
    sprite = RexSprite(-1, 3, 2, 2)
    sprite.set_tile(0, 0, 0, RexTile(ord("@"), Color(255, 255, 0), Color(0, 0, 0)))
    sprite.set_tile(0, 2, 1, RexTile(ord("#"), Color(10, 20, 30), Color(40, 50, 60)))
    sprite.set_tile(1, 1, 0, RexTile(ord("*"), Color(1, 2, 3), Color(4, 5, 6)))
    return sprite


def test_transparent_tile_has_magenta_background():
    tile = transparent_tile()
    assert tile.background == Color(255, 0, 255)
    assert is_transparent(tile)
    assert not is_transparent(RexTile(0, Color(), Color(255, 0, 254)))


def test_new_sprite_layers_above_first_are_transparent():
    sprite = RexSprite(1, 4, 3, 3)
    assert sprite.num_layers == 3
    assert not any(is_transparent(sprite.tile_at_index(0, i)) for i in range(12))
    assert all(is_transparent(sprite.tile_at_index(layer, i)) for layer in (1, 2) for i in range(12))


def test_tiles_are_stored_column_major():
    sprite = RexSprite(1, 3, 2, 1)
    tile = RexTile(65, Color(1, 1, 1), Color(2, 2, 2))
    sprite.set_tile(0, 2, 1, tile)
    assert sprite.tile_at_index(0, 1 + 2 * sprite.height) == tile
    sprite.set_tile_at_index(0, 0, tile)
    assert sprite.get_tile(0, 0, 0) == tile


def test_save_and_load_round_trip(tmp_path):
    sprite = _sample_sprite()
    path = tmp_path / "sprite.xp"
    sprite.save(path)
    loaded = RexSprite.load(path)
    assert (loaded.version, loaded.width, loaded.height, loaded.num_layers) == (-1, 3, 2, 2)
    for layer in range(2):
        for x in range(3):
            for y in range(2):
                assert loaded.get_tile(layer, x, y) == sprite.get_tile(layer, x, y)


def test_saved_file_layout(tmp_path):
    sprite = _sample_sprite()
    path = tmp_path / "sprite.xp"
    sprite.save(path)
    raw = gzip.decompress(path.read_bytes())
    assert struct.unpack_from("<ii", raw, 0) == (-1, 2)
    assert struct.unpack_from("<ii", raw, 8) == (3, 2)
    assert struct.unpack_from("<I6B", raw, 16) == (ord("@"), 255, 255, 0, 0, 0, 0)
    assert len(raw) == 8 + 2 * (8 + 6 * 10)


def test_uncompressed_file_loads(tmp_path):
    sprite = _sample_sprite()
    gz_path = tmp_path / "a.xp"
    sprite.save(gz_path)
    plain_path = tmp_path / "b.xp"
    plain_path.write_bytes(gzip.decompress(gz_path.read_bytes()))
    loaded = RexSprite.load(plain_path)
    assert loaded.get_tile(1, 1, 0) == sprite.get_tile(1, 1, 0)


def test_flatten_respects_transparency():
    sprite = _sample_sprite()
    under = sprite.get_tile(0, 0, 0)
    over = sprite.get_tile(1, 1, 0)
    sprite.flatten()
    assert sprite.num_layers == 1
    assert sprite.get_tile(0, 0, 0) == under
    assert sprite.get_tile(0, 1, 0) == over


def test_flatten_then_save_writes_one_layer(tmp_path):
    sprite = _sample_sprite()
    sprite.flatten()
    path = tmp_path / "flat.xp"
    sprite.save(path)
    assert RexSprite.load(path).num_layers == 1


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        RexSprite.load(tmp_path / "nope.xp")


def test_truncated_file_raises(tmp_path):
    sprite = _sample_sprite()
    path = tmp_path / "sprite.xp"
    sprite.save(path)
    raw = gzip.decompress(path.read_bytes())
    bad = tmp_path / "bad.xp"
    bad.write_bytes(raw[:30])
    with pytest.raises(ValueError):
        RexSprite.load(bad)


@pytest.mark.parametrize("layer,x,y", [(2, 0, 0), (0, 3, 0), (0, 0, 2), (0, -1, 0)])
def test_out_of_range_tile_raises(layer, x, y):
    sprite = _sample_sprite()
    with pytest.raises(IndexError):
        sprite.get_tile(layer, x, y)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        RexSprite(1, -1, 2, 1)