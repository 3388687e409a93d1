"""Hide a message in the 8x8 DCT coefficients of an image's luma channel.

Each bit goes into one 8x8 block, taken in row-major order: coefficient
(3, 4) of the block is set to plus or minus the absolute mean of the block's
coefficients. On extraction a bit is 1 when that coefficient exceeds half the
block's mean.
"""

from __future__ import annotations

import math
import sys
import time

import numpy as np

from hpclab.stegano_io import load_png, logo_to_message, message_to_logo, save_png

_B = 8
_ROW = 3
_COL = 4


def rgb_to_ycbcr(rgb):
    """Convert an ``(..., 3)`` RGB array to float32 planes ``(Y, Cr, Cb)``."""
    arr = np.asarray(rgb, dtype=np.float64)
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    y = 0.299 * r + 0.587 * g + 0.114 * b
    cr = 128.0 - 0.168736 * r - 0.3331264 * g + 0.5 * b
    cb = 128.0 + 0.5 * r - 0.418688 * g - 0.081312 * b
    return np.stack([y, cr, cb], axis=-1).astype(np.float32)


def ycbcr_to_rgb(ycbcr):
    """Convert ``(Y, Cr, Cb)`` planes back to float32 RGB clamped to [0, 255]."""
    arr = np.asarray(ycbcr, dtype=np.float64)
    y, cr, cb = arr[..., 0], arr[..., 1], arr[..., 2]
    r = y + 1.402 * (cb - 128.0)
    g = y - 0.34414 * (cr - 128.0) - 0.71414 * (cb - 128.0)
    b = y + 1.772 * (cr - 128.0)
    return np.clip(np.stack([r, g, b], axis=-1), 0.0, 255.0).astype(np.float32)


def dct_params():
    """Return the 8x8 cosine table and the 8 normalisation factors of the DCT."""
    idx = np.arange(_B)
    cosine = np.cos(np.outer(2 * idx + 1, idx) * math.pi / (2 * _B)).astype(np.float32)
    alpha = np.full(_B, math.sqrt(2.0) / math.sqrt(_B), dtype=np.float32)
    alpha[0] = 1.0 / math.sqrt(_B)
    return cosine, alpha


def _whole(shape):
    return shape[0] // _B * _B, shape[1] // _B * _B


def _as_blocks(region):
    h, w = region.shape
    return region.astype(np.float64).reshape(h // _B, _B, w // _B, _B)


def dct8x8(plane, cosine, alpha):
    """Blockwise 2-D DCT of ``plane``; values outside whole 8x8 blocks pass through."""
    src = np.asarray(plane, dtype=np.float32)
    out = src.copy()
    h, w = _whole(src.shape)
    if h and w:
        c = np.asarray(cosine, dtype=np.float64)
        a = np.asarray(alpha, dtype=np.float64)
        blocks = _as_blocks(src[:h, :w])
        coeffs = np.einsum("xayb,ai,bj->xiyj", blocks, c, c)
        coeffs *= np.outer(a, a)[None, :, None, :]
        out[:h, :w] = coeffs.reshape(h, w)
    return out


def idct8x8(coeffs, cosine, alpha):
    """Blockwise inverse of :func:`dct8x8`; values outside whole blocks pass through."""
    src = np.asarray(coeffs, dtype=np.float32)
    out = src.copy()
    h, w = _whole(src.shape)
    if h and w:
        c = np.asarray(cosine, dtype=np.float64)
        a = np.asarray(alpha, dtype=np.float64)
        scaled = _as_blocks(src[:h, :w]) * np.outer(a, a)[None, :, None, :]
        plane = np.einsum("xayb,ia,jb->xiyj", scaled, c, c)
        out[:h, :w] = plane.reshape(h, w)
    return out


def _check_capacity(shape, nbits):
    blocks = (shape[0] // _B) * (shape[1] // _B)
    if blocks < nbits:
        raise ValueError(
            f"image not enough to hold the message: {blocks} blocks for {nbits} bits"
        )


def _block(coeffs, k):
    bi, bj = divmod(k, coeffs.shape[1] // _B)
    return coeffs[bi * _B:(bi + 1) * _B, bj * _B:(bj + 1) * _B]


def insert_message(coeffs, message):
    """Return a copy of the DCT coefficients with ``message`` hidden in them."""
    data = bytes(message)
    out = np.array(coeffs, dtype=np.float32)
    bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder="little")
    _check_capacity(out.shape, bits.size)
    for k, bit in enumerate(bits):
        block = _block(out, k)
        mean = abs(float(block.mean(dtype=np.float64)))
        block[_ROW, _COL] = mean if bit else -mean
    return out


def extract_message(coeffs, length):
    """Read ``length`` bytes hidden by :func:`insert_message`."""
    src = np.asarray(coeffs, dtype=np.float32)
    nbits = 8 * length
    _check_capacity(src.shape, nbits)
    bits = np.zeros(nbits, dtype=np.uint8)
    for k in range(nbits):
        block = _block(src, k)
        mean = float(block.mean(dtype=np.float64))
        bits[k] = float(block[_ROW, _COL]) > 0.5 * mean
    return np.packbits(bits, bitorder="little").tobytes()


def _luma_coefficients(pixels):
    ycc = rgb_to_ycbcr(pixels)
    cosine, alpha = dct_params()
    return ycc, dct8x8(ycc[..., 0], cosine, alpha), cosine, alpha


def encode(file_in, file_out, message):
    """Hide ``message`` in the image ``file_in``, save it as ``file_out`` and return its pixels."""
    pixels = load_png(file_in)
    ycc, coeffs, cosine, alpha = _luma_coefficients(pixels)
    coeffs = insert_message(coeffs, message)
    ycc[..., 0] = idct8x8(coeffs, cosine, alpha)
    encoded = ycbcr_to_rgb(ycc).astype(np.uint8)
    save_png(file_out, encoded)
    return encoded


def decode(file_in, length):
    """Extract a ``length``-byte message from the image ``file_in``."""
    pixels = load_png(file_in)
    _, coeffs, _, _ = _luma_coefficients(pixels)
    return extract_message(coeffs, length)


def main(argv=None):
    """Hide a logo in an image, read it back and draw it as ``logo_out.png``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("usage: stegano image_in.png logo.png image_out.png")
        return -1
    file_in, file_logo, file_out = args[:3]

    message = logo_to_message(file_logo)

    start = time.perf_counter()
    encode(file_in, file_out, message)
    print(f"Encoding time={time.perf_counter() - start:f} sec.")

    start = time.perf_counter()
    decoded = decode(file_out, len(message))
    print(f"Decoding time={time.perf_counter() - start:f} sec.")

    message_to_logo("logo_out.png", decoded)
    return 0