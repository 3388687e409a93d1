"""PNG input/output and conversion between logo images and hidden messages.

A logo is a black-and-white picture whose pixels, read row by row, hold the
bits of a message: a non-zero red component is a 1 bit. Bits are packed into
bytes least significant bit first.
"""

from __future__ import annotations

import math

import numpy as np
from PIL import Image


def load_png(path):
    """Read an image as an ``(height, width, 3)`` uint8 RGB array."""
    with Image.open(path) as img:
        return np.array(img.convert("RGB"), dtype=np.uint8)


def save_png(path, pixels):
    """Write an ``(height, width, 3)`` uint8 RGB array as a PNG file."""
    arr = np.asarray(pixels, dtype=np.uint8)
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"expected an (height, width, 3) array, got shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError("cannot save an empty image")
    Image.fromarray(np.ascontiguousarray(arr)).save(path, format="PNG")


def logo_to_message(path):
    """Read the message held in a logo image: one bit per pixel, a byte per 8 pixels.

    Pixels left over after the last whole byte are ignored.
    """
    pixels = load_png(path)
    bits = (pixels[..., 0].reshape(-1) != 0).astype(np.uint8)
    whole = bits.size // 8 * 8
    return np.packbits(bits[:whole], bitorder="little").tobytes()


def message_to_logo(path, message):
    """Draw ``message`` as a square black-and-white logo, save it and return its pixels.

    The side of the square is the nearest integer to the square root of the
    number of bits; bits that do not fit are dropped and unused pixels stay black.
    """
    data = bytes(message)
    if not data:
        raise ValueError("cannot draw a logo for an empty message")
    side = int(math.floor(math.sqrt(8.0 * len(data)) + 0.5))
    bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder="little")
    flat = np.zeros(side * side, dtype=np.uint8)
    count = min(bits.size, flat.size)
    flat[:count] = bits[:count] * 255
    pixels = np.repeat(flat.reshape(side, side)[..., None], 3, axis=2)
    save_png(path, pixels)
    return pixels