"""Perceptually uniform colormaps: magma, inferno, plasma and viridis.

A value in ``[vmin, vmax]`` is mapped to a colour by linear interpolation
between the two nearest entries of a 256-entry colour table. Values outside
the range are clamped to it.
"""

from __future__ import annotations

import enum
import math

from hpclab.cmdata_magma_inferno import INFERNO, MAGMA
from hpclab.cmdata_plasma_viridis import PLASMA, VIRIDIS

_SIZE = 256
_MAX = _SIZE - 1


class Colormap(enum.IntEnum):
    """The available colour tables."""

    MAGMA = 0
    INFERNO = 1
    PLASMA = 2
    VIRIDIS = 3


_TABLES = {
    Colormap.MAGMA: MAGMA,
    Colormap.INFERNO: INFERNO,
    Colormap.PLASMA: PLASMA,
    Colormap.VIRIDIS: VIRIDIS,
}


def table(cm):
    """Return the 256 (r, g, b) entries of colormap ``cm``."""
    return _TABLES[Colormap(cm)]


def _lerp(v0, v1, t):
    return t * v1 + (1.0 - t) * v0


def rgbf(cm, value, vmin, vmax):
    """Map ``value`` in ``[vmin, vmax]`` to float (r, g, b) components in [0, 1]."""
    data = table(cm)
    if vmax == vmin:
        raise ValueError("colormap range is empty: vmin equals vmax")
    if math.isnan(value):
        clamped = vmax
    else:
        clamped = max(min(value, vmax), vmin)
    step = (vmax - vmin) / _MAX
    pos, slot = math.modf((clamped - vmin) / step)
    point1 = min(int(slot), _MAX)
    point2 = min(point1 + 1, _MAX)
    return tuple(_lerp(a, b, pos) for a, b in zip(data[point1], data[point2]))


def rgb(cm, value, vmin, vmax):
    """Map ``value`` in ``[vmin, vmax]`` to 8-bit (r, g, b) components."""
    return tuple(int(round(c * 255.0)) for c in rgbf(cm, value, vmin, vmax))