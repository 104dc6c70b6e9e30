import numpy as np
import pytest
from PIL import Image

from render_server.image import ImageAssembler, to_uint8
from render_server.tiles import TileGrid


def rendered_tiles(height, width, tile_height, tile_width, value=0.5):
    for tile in TileGrid(height, width, tile_height, tile_width):
        tile.pixels = np.full((tile.pixel_count, 3), value)
        yield tile


def test_assembles_every_pixel_once():
    image = ImageAssembler(7, 5)
    for tile in rendered_tiles(5, 7, 2, 3):
        image.place(tile)
    assert image.complete()
    assert image.tiles_placed == 9
    assert np.all(image.buffer == 0.5)


def test_placement_follows_tile_offset():
    image = ImageAssembler(4, 4)
    tiles = list(TileGrid(4, 4, 2, 2))
    for tile in reversed(tiles):
        tile.pixels = np.full((tile.pixel_count, 3), float(tile.index))
        image.place(tile)

    assert image.buffer[0, 0, 0] == 0
    assert image.buffer[0, 3, 0] == 1
    assert image.buffer[3, 0, 0] == 2
    assert image.buffer[3, 3, 0] == 3


def test_row_major_pixels_within_tile():
    image = ImageAssembler(3, 2)
    tile = TileGrid(2, 3, 2, 3).tile(0)
    tile.pixels = np.arange(18, dtype=np.float64).reshape(6, 3)
    image.place(tile)
    assert image.buffer[0, 2].tolist() == [6, 7, 8]
    assert image.buffer[1, 0].tolist() == [9, 10, 11]


def test_missing_or_duplicate_tiles_are_incomplete():
    image = ImageAssembler(4, 4)
    tiles = list(rendered_tiles(4, 4, 2, 2))
    for tile in tiles[:-1]:
        image.place(tile)
    assert not image.complete()
    image.place(tiles[-1])
    assert image.complete()
    image.place(tiles[0])
    assert not image.complete()


def test_unrendered_tile_rejected():
    image = ImageAssembler(4, 4)
    with pytest.raises(ValueError):
        image.place(TileGrid(4, 4, 2, 2).tile(0))


def test_to_uint8_quantization():
    values = np.array([[[0.0, 0.5, 1.0], [-0.2, 0.999, 2.0]]])
    assert to_uint8(values).tolist() == [[[0, 128, 255], [0, 255, 255]]]


def test_write_ppm(tmp_path):
    image = ImageAssembler(2, 1)
    tile = TileGrid(1, 2, 1, 2).tile(0)
    tile.pixels = np.array([[0.0, 0.5, 1.0], [0.25, 0.25, 0.25]])
    image.place(tile)

    path = tmp_path / "out.ppm"
    image.write_ppm(path)
    assert path.read_text() == "P3\n2 1\n255\n0 128 255\n64 64 64\n"


def test_save_png_via_pillow(tmp_path):
    image = ImageAssembler(7, 5)
    for tile in rendered_tiles(5, 7, 2, 3, value=1.0):
        image.place(tile)

    path = tmp_path / "out.png"
    image.save(path)
    with Image.open(path) as img:
        assert img.size == (7, 5)
        assert img.getpixel((6, 4)) == (255, 255, 255)


def test_save_ppm_by_extension(tmp_path):
    image = ImageAssembler(7, 5)
    for tile in rendered_tiles(5, 7, 2, 3):
        image.place(tile)
    path = tmp_path / "out.PPM"
    image.save(path)
    assert path.read_text().startswith("P3\n7 5\n255\n")


def test_io_errors_propagate(tmp_path):
    image = ImageAssembler(1, 1)
    with pytest.raises(OSError):
        image.save(tmp_path / "missing-dir" / "out.ppm")
