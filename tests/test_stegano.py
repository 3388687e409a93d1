import math

import numpy as np
import pytest

from hpclab.stegano import (
    dct8x8,
    dct_params,
    decode,
    encode,
    extract_message,
    idct8x8,
    insert_message,
    main,
    rgb_to_ycbcr,
    ycbcr_to_rgb,
)
from hpclab.stegano_io import load_png, logo_to_message, message_to_logo, save_png


def _cover(h=64, w=64):
    y, x = np.mgrid[0:h, 0:w]
    return np.stack([100 + x, 120 + y, 90 + (x + y) // 2], axis=-1).astype(np.uint8)


def _luma_coeffs(pixels):
    cosine, alpha = dct_params()
    return dct8x8(rgb_to_ycbcr(pixels)[..., 0], cosine, alpha)


def test_dct_params_are_orthonormal():
    cosine, alpha = dct_params()
    assert cosine.shape == (8, 8)
    assert np.allclose(cosine[:, 0], 1.0)
    assert alpha[0] == pytest.approx(1.0 / math.sqrt(8))
    basis = cosine.astype(np.float64) * alpha.astype(np.float64)[None, :]
    assert np.allclose(basis.T @ basis, np.eye(8), atol=1e-6)


def test_dct_of_constant_block_is_dc_only():
    cosine, alpha = dct_params()
    coeffs = dct8x8(np.full((8, 8), 10.0), cosine, alpha)
    assert coeffs[0, 0] == pytest.approx(80.0, abs=1e-3)
    rest = coeffs.copy()
    rest[0, 0] = 0.0
    assert np.allclose(rest, 0.0, atol=1e-4)


def test_dct_idct_round_trip():
    rng = np.random.default_rng(1)
    plane = rng.uniform(0, 255, size=(16, 24)).astype(np.float32)
    cosine, alpha = dct_params()
    back = idct8x8(dct8x8(plane, cosine, alpha), cosine, alpha)
    assert np.allclose(back, plane, atol=1e-3)


def test_partial_blocks_pass_through():
    rng = np.random.default_rng(2)
    plane = rng.uniform(0, 255, size=(10, 13)).astype(np.float32)
    cosine, alpha = dct_params()
    coeffs = dct8x8(plane, cosine, alpha)
    assert np.array_equal(coeffs[8:, :], plane[8:, :])
    assert np.array_equal(coeffs[:, 8:], plane[:, 8:])
    back = idct8x8(coeffs, cosine, alpha)
    assert np.allclose(back, plane, atol=1e-3)


def test_gray_luma_and_black():
    ycc = rgb_to_ycbcr(np.array([[[200, 200, 200], [0, 0, 0]]], dtype=np.uint8))
    assert ycc[0, 0, 0] == pytest.approx(200.0, abs=1e-3)
    assert np.allclose(ycc[0, 1], [0.0, 128.0, 128.0])


def test_ycbcr_to_rgb_clamps():
    rgb = ycbcr_to_rgb(np.array([[[300.0, 128.0, 128.0], [-10.0, 128.0, 128.0]]]))
    assert np.allclose(rgb[0, 0], 255.0)
    assert np.allclose(rgb[0, 1], 0.0)


def test_colour_round_trip_is_close():
    rng = np.random.default_rng(3)
    rgb = rng.integers(20, 230, size=(6, 6, 3)).astype(np.float32)
    back = ycbcr_to_rgb(rgb_to_ycbcr(rgb))
    assert np.max(np.abs(back - rgb)) < 1.0


def test_luma_survives_colour_round_trip():
    rng = np.random.default_rng(4)
    rgb = rng.integers(20, 230, size=(6, 6, 3)).astype(np.float32)
    ycc = rgb_to_ycbcr(rgb)
    again = rgb_to_ycbcr(ycbcr_to_rgb(ycc))
    assert np.allclose(again[..., 0], ycc[..., 0], atol=1e-2)


def test_insert_sets_signed_block_mean():
    coeffs = _luma_coeffs(_cover())
    marked = insert_message(coeffs, b"\x01")
    assert np.array_equal(coeffs, _luma_coeffs(_cover()))
    mean0 = abs(float(coeffs[0:8, 0:8].mean(dtype=np.float64)))
    assert marked[3, 4] == pytest.approx(mean0, rel=1e-5)
    for k in range(1, 8):
        assert marked[3, 8 * k + 4] < 0


def test_insert_extract_round_trip():
    coeffs = _luma_coeffs(_cover())
    message = b"Hi there"
    assert extract_message(insert_message(coeffs, message), len(message)) == message


def test_insert_rejects_too_long_message():
    coeffs = _luma_coeffs(_cover(16, 16))
    with pytest.raises(ValueError):
        insert_message(coeffs, b"ab")


def test_extract_rejects_too_long_request():
    coeffs = _luma_coeffs(_cover(16, 16))
    with pytest.raises(ValueError):
        extract_message(coeffs, 2)


def test_encode_decode_through_files(tmp_path):
    cover = _cover()
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    save_png(src, cover)
    message = b"secretly"
    encoded = encode(src, dst, message)
    assert encoded.shape == cover.shape
    assert np.array_equal(load_png(dst), encoded)
    assert np.max(np.abs(encoded.astype(int) - cover.astype(int))) < 20
    assert decode(dst, len(message)) == message


def test_encode_fails_without_writing_when_too_small(tmp_path):
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    save_png(src, _cover(16, 16))
    with pytest.raises(ValueError):
        encode(src, dst, b"too long")
    assert not dst.exists()


def test_main_reproduces_logo(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    save_png(tmp_path / "cover.png", _cover())
    message_to_logo(tmp_path / "logo.png", b"ABCDEFGH")
    status = main(["cover.png", "logo.png", "stego.png"])
    assert status == 0
    assert logo_to_message(tmp_path / "logo_out.png") == b"ABCDEFGH"
    out = capsys.readouterr().out
    assert "Encoding time=" in out
    assert "Decoding time=" in out


def test_main_requires_three_arguments(capsys):
    assert main(["only.png"]) == -1
    assert "usage" in capsys.readouterr().out