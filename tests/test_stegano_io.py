import numpy as np
import pytest
from PIL import Image

from hpclab.stegano_io import load_png, logo_to_message, message_to_logo, save_png


def test_save_load_round_trip(tmp_path):
    rng = np.random.default_rng(0)
    pixels = rng.integers(0, 256, size=(7, 5, 3), dtype=np.uint8)
    path = tmp_path / "img.png"
    save_png(path, pixels)
    loaded = load_png(path)
    assert loaded.shape == (7, 5, 3)
    assert np.array_equal(loaded, pixels)


def test_load_png_drops_alpha(tmp_path):
    path = tmp_path / "rgba.png"
    rgba = np.zeros((2, 3, 4), dtype=np.uint8)
    rgba[..., 0] = 10
    rgba[..., 3] = 200
    Image.fromarray(rgba).save(path)
    loaded = load_png(path)
    assert loaded.shape == (2, 3, 3)
    assert np.all(loaded[..., 0] == 10)


def test_save_png_rejects_wrong_shape(tmp_path):
    with pytest.raises(ValueError):
        save_png(tmp_path / "bad.png", np.zeros((4, 4), dtype=np.uint8))


@pytest.mark.parametrize("message", [b"\x00\xff", b"ABCDEFGH", bytes(range(18))])
def test_logo_round_trip(tmp_path, message):
    path = tmp_path / "logo.png"
    message_to_logo(path, message)
    assert logo_to_message(path) == message


def test_logo_pixels_are_black_or_white(tmp_path):
    pixels = message_to_logo(tmp_path / "logo.png", b"hello world!")
    assert set(np.unique(pixels)) <= {0, 255}
    assert np.array_equal(pixels[..., 0], pixels[..., 1])
    assert np.array_equal(pixels[..., 0], pixels[..., 2])


def test_logo_side_is_rounded_square_root(tmp_path):
    pixels = message_to_logo(tmp_path / "logo.png", b"abc")
    assert pixels.shape == (5, 5, 3)


def test_bits_are_least_significant_first(tmp_path):
    path = tmp_path / "row.png"
    pixels = np.zeros((1, 8, 3), dtype=np.uint8)
    pixels[0, 0, 0] = 255
    save_png(path, pixels)
    assert logo_to_message(path) == b"\x01"


def test_only_red_channel_counts(tmp_path):
    path = tmp_path / "row.png"
    pixels = np.zeros((1, 8, 3), dtype=np.uint8)
    pixels[0, :, 1] = 255
    pixels[0, :, 2] = 255
    save_png(path, pixels)
    assert logo_to_message(path) == b"\x00"


def test_partial_byte_is_ignored(tmp_path):
    path = tmp_path / "odd.png"
    pixels = np.full((1, 11, 3), 255, dtype=np.uint8)
    save_png(path, pixels)
    assert logo_to_message(path) == b"\xff"


def test_empty_message_rejected(tmp_path):
    with pytest.raises(ValueError):
        message_to_logo(tmp_path / "logo.png", b"")